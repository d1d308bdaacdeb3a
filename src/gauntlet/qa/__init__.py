from .harness import Divergence, QAHarness, QATrace, RecordingRandomSource, draw_digest, trace_game

__all__ = ["Divergence", "QAHarness", "QATrace", "RecordingRandomSource", "draw_digest", "trace_game"]
