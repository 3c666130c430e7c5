import pytest

from lpgraph.config import ViewportConfig, get_viewport_config, set_viewport_config
from lpgraph.parser import parse_expression
from lpgraph.projection import project


def test_default_viewport():
    config = get_viewport_config()
    assert config.variables == ('x', 'y')
    assert (config.minimum, config.maximum) == (-1000.0, 1000.0)


def test_get_returns_a_copy():
    config = get_viewport_config()
    config.maximum = 5.0
    assert get_viewport_config().maximum == 1000.0


def test_set_viewport_config_changes_projection_default():
    original = get_viewport_config()
    try:
        set_viewport_config(ViewportConfig(minimum=-1, maximum=1))
        line = project(parse_expression('x', ['x', 'y']))
        assert (line.y1, line.y2) == (-1.0, 1.0)
    finally:
        set_viewport_config(original)


@pytest.mark.parametrize(
    'kwargs, message',
    [
        ({'variables': ('x',)}, 'exactly two'),
        ({'variables': ('x', 'x')}, 'distinct'),
        ({'minimum': 1, 'maximum': 1}, 'below maximum'),
    ],
)
def test_invalid_config(kwargs, message):
    with pytest.raises(ValueError) as exc:
        ViewportConfig(**kwargs)
    assert message in str(exc.value)
