from .result_set_streamer import stream_result_set

__all__ = ["stream_result_set"]
