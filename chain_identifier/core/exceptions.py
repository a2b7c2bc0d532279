class ChainIdentifierError(Exception):
    """Base exception for identification errors"""
    pass

class InvalidInputError(ChainIdentifierError):
    """Input could not be classified or identified"""

    def __init__(self, message: str, input: str = ""):
        super().__init__(message)
        self.input = input

class EncodingError(ChainIdentifierError):
    """Malformed encoded data"""
    pass

class ChecksumError(ChainIdentifierError):
    """Checksum mismatch or malformed checksum"""
    pass

class DerivationError(ChainIdentifierError):
    """Address derivation from a public key failed"""
    pass

class PipelineError(ChainIdentifierError):
    """Unknown or misconfigured derivation pipeline"""
    pass

class MetadataError(ChainIdentifierError):
    """Chain, curve or pipeline definition could not be loaded"""
    pass

class ConfigError(ChainIdentifierError):
    """Invalid configuration"""
    pass
