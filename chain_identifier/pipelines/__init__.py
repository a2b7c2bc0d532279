from chain_identifier.pipelines.dispatcher import PIPELINES, execute_pipeline, is_supported

__all__ = [
    'PIPELINES',
    'execute_pipeline',
    'is_supported'
]
