"""Sample plugins covering every prepare-hook shape the registry handles."""

import asyncio


class RecordingPlugin:
    """Plugin base that remembers constructor arguments."""

    def __init__(self, data, config):
        self.data = data
        self.config = config


class NoPrepareTool(RecordingPlugin):
    """Tool without a prepare hook."""


class ReadyTool(RecordingPlugin):
    """Tool whose prepare hook succeeds synchronously."""

    @staticmethod
    def prepare(data):
        return True


class SlowReadyTool(RecordingPlugin):
    """Tool whose prepare hook succeeds after a short sleep."""

    @staticmethod
    async def prepare(data):
        await asyncio.sleep(0.01)
        return "ready"


class BrokenTool(RecordingPlugin):
    """Tool whose prepare hook raises synchronously."""

    @staticmethod
    def prepare(data):
        raise RuntimeError("missing dependency")


class RejectingTool(RecordingPlugin):
    """Tool whose async prepare hook fails."""

    @classmethod
    async def prepare(cls, data):
        raise ConnectionError("cdn unreachable")
