from blockslide.engine.replay.replay import replay, verify

__all__ = ["replay", "verify"]
