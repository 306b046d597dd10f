"""WS-Management protocol constants."""

NS_SOAP_ENV = "http://www.w3.org/2003/05/soap-envelope"
NS_ADDRESSING = "http://schemas.xmlsoap.org/ws/2004/08/addressing"
NS_WSMAN_DMTF = "http://schemas.dmtf.org/wbem/wsman/1/wsman.xsd"
NS_WSMAN_MSFT = "http://schemas.microsoft.com/wbem/wsman/1/wsman.xsd"
NS_WSMAN_FAULT = "http://schemas.microsoft.com/wbem/wsman/1/wsmanfault"
NS_WIN_SHELL = "http://schemas.microsoft.com/wbem/wsman/1/windows/shell"

NAMESPACES = {
    "env": NS_SOAP_ENV,
    "a": NS_ADDRESSING,
    "w": NS_WSMAN_DMTF,
    "p": NS_WSMAN_MSFT,
    "f": NS_WSMAN_FAULT,
    "rsp": NS_WIN_SHELL,
}

RESOURCE_URI_CMD = "http://schemas.microsoft.com/wbem/wsman/1/windows/shell/cmd"
ACTION_RECEIVE = "http://schemas.microsoft.com/wbem/wsman/1/windows/shell/Receive"
ANONYMOUS_ADDRESS = "http://schemas.xmlsoap.org/ws/2004/08/addressing/role/anonymous"

COMMAND_STATE_DONE = (
    "http://schemas.microsoft.com/wbem/wsman/1/windows/shell/CommandState/Done"
)

# Returned when no output was ready before wsman:OperationTimeout expired.
# The client should issue another Receive (MS-WSMV 3.1.4.14).
RECEIVE_TIMEOUT_FAULT_CODE = "2150858793"

DEFAULT_OUT_STREAMS = ("stdout", "stderr")
