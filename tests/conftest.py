import pytest

from gacha_engine.engine import MODEL_LOGIC


class ScriptedSource:
    """Sample source that replays a fixed list of draws."""

    def __init__(self, values):
        self.values = list(values)
        self.index = 0

    def get(self):
        if self.index >= len(self.values):
            raise AssertionError(f"scripted source exhausted after {self.index} draws")
        value = self.values[self.index]
        self.index += 1
        return value

    @property
    def remaining(self):
        return len(self.values) - self.index


@pytest.fixture
def scripted():
    return ScriptedSource


@pytest.fixture(params=sorted(MODEL_LOGIC))
def variant_key(request):
    return request.param
