import pytest
from superschema import Validator, set_default_validator

class Observable:
    def __init__(self, value):
        self.value = value
    def __call__(self):
        return self.value

class FakeKnockout:
    def __init__(self):
        self.seen = []
    def is_observable(self, value):
        self.seen.append(value)
        return isinstance(value, Observable)

@pytest.fixture(autouse=True)
def fresh_default_validator():
    previous = set_default_validator(Validator())
    yield
    set_default_validator(previous)

@pytest.fixture
def ko():
    return FakeKnockout()

@pytest.fixture
def validator(ko):
    return Validator().with_observable_lib(ko)
