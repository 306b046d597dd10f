"""Decoder for base64 encoded rsp:Stream text."""

import base64
import binascii
import logging

logger = logging.getLogger(__name__)

UTF8_BOM = "\ufeff"


class CommandOutputDecoder:
    """Turns raw rsp:Stream text into printable output."""

    def decode(self, raw_output: str) -> str | None:
        """Decode a stream chunk.

        Args:
            raw_output: Base64 text of one rsp:Stream element

        Returns:
            Decoded text, or None if the chunk is empty or not base64
        """
        if not raw_output:
            return None
        try:
            raw_bytes = base64.b64decode(raw_output)
        except (binascii.Error, ValueError) as e:
            logger.warning("Dropping undecodable output chunk: %s", e)
            return None

        # Invalid UTF-8 sequences are replaced rather than rejected
        text = raw_bytes.decode("utf-8", errors="replace")
        text = text.replace(UTF8_BOM, "", 1)
        return text or None
