from .batch_reader import BATCH_SEPARATOR, read_batches

__all__ = ["BATCH_SEPARATOR", "read_batches"]
