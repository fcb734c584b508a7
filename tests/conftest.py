import pytest

SAMPLE = """\
// sample program
int x;
int y;
x = 10;
y = x + 2 * 3;
if (x > y) {
    print(x);
} else {
    print(y);
}
while (x < 20) {
    x = x + 1;
}
"""

@pytest.fixture
def sample():
    return SAMPLE
