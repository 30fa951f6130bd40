import pytest


class FixedRandom:
    """Random source returning the same draw every time.

    A draw of 0.4 gives zero jitter with the default smoke randomness and
    loses the coin flip for wide puffs.
    """

    def __init__(self, value: float = 0.4) -> None:
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def still_air():
    return FixedRandom(0.4)
