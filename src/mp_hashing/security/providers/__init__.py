"""Security – crypto provider implementations."""
from mp_hashing.security.providers.openssl import OpenSSLCryptoProvider, default_provider

__all__ = ["OpenSSLCryptoProvider", "default_provider"]
