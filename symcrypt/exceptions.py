# symcrypt/exceptions.py


class SymmetricCryptError(Exception):
    """Base exception for all symcrypt errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(SymmetricCryptError):
    """Raised when a setting or a provider selection cannot be used."""
    pass


class ProviderOutOfRangeError(ConfigurationError):
    """Raised when the requested algorithm is not one of the supported providers."""
    def __init__(self, value):
        self.value = value
        super().__init__(f"Unsupported symmetric crypt provider: {value!r}")


class FatalTransformError(SymmetricCryptError):
    """Raised when the cipher could not be keyed or the encryption transform failed."""
    pass
