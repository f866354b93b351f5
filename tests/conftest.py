import pytest


class ScriptedRandom:
    """Random source replaying fixed values, then ``then`` forever."""

    def __init__(self, values, then=0.5):
        self.values = list(values)
        self.then = then
        self.calls = 0

    def random(self):
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        return self.then


@pytest.fixture
def scripted():
    return ScriptedRandom
