"""Configuration module for winrm_output.

- Settings: Environment variable configuration
"""

from winrm_output.config.settings import Settings

__all__ = ["Settings"]
