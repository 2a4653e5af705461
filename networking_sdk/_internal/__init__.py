"""Internal modules for the networking SDK.

WARNING: These are not intended for direct use in application code.

Modules:
    http - Shared HTTP client configuration
    request_builder - Endpoint to transport request translation
    response - Response classification and decoding
    redaction - Masking of sensitive values in debug output
"""
