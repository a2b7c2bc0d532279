from chain_identifier.input.characteristics import InputCharacteristics, extract_characteristics
from chain_identifier.input.classifier import InputPossibility, KeyForm, classify_input
from chain_identifier.input.signature import CategorySignature
from chain_identifier.input.matcher import ChainMatch, match_input_with_metadata

__all__ = [
    'InputCharacteristics',
    'extract_characteristics',
    'InputPossibility',
    'KeyForm',
    'classify_input',
    'CategorySignature',
    'ChainMatch',
    'match_input_with_metadata'
]
