import pytest


class DummyServer:
    """Minimal low-level MCP Server stand-in to capture handler registration."""

    def __init__(self) -> None:
        self.handlers = {}
        self.call_tool_options = {}

    def list_tools(self):
        def _decorator(fn):
            self.handlers["list_tools"] = fn
            return fn
        return _decorator

    def call_tool(self, *, validate_input: bool = True):
        self.call_tool_options["validate_input"] = validate_input

        def _decorator(fn):
            self.handlers["call_tool"] = fn
            return fn
        return _decorator


class FakeSession:
    """AnalysisSession double returning canned results per operation."""

    def __init__(self, content, results, fail_on_init=False):
        self.content = content
        self.results = results
        self.fail_on_init = fail_on_init
        self.initialized = False
        self.calls = []

    async def initialize(self):
        if self.fail_on_init:
            raise ValueError("Syntax error at line 1")
        self.initialized = True

    def __getattr__(self, operation):
        async def _op(*args):
            assert self.initialized
            self.calls.append((operation, args))
            return self.results[operation]
        return _op


class FakeSessionFactory:
    def __init__(self, results=None, fail_on_init=False):
        self.results = results or {}
        self.fail_on_init = fail_on_init
        self.sessions = []

    def __call__(self, content):
        session = FakeSession(content, self.results, fail_on_init=self.fail_on_init)
        self.sessions.append(session)
        return session


@pytest.fixture
def dummy_server():
    return DummyServer()


@pytest.fixture
def session_factory():
    return FakeSessionFactory
