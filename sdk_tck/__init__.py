"""sdk_tck - conformance test kit for ledger SDKs driven over JSON-RPC."""

__version__ = "0.1.0"
__logo__ = "🧪"
