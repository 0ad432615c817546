from linkunwrap.resolver.registry import SITES
from linkunwrap.resolver.subscriptions import SUBSCRIPTIONS, build_subscriptions


def test_one_pattern_per_entry_in_order():
    expected = [f"*://{h}{p}*" for h, paths in SITES.items() for p in paths]
    assert build_subscriptions() == expected
    assert list(SUBSCRIPTIONS) == expected


def test_known_patterns():
    assert SUBSCRIPTIONS[0] == "*://*.curseforge.com/linkout*"
    assert "*://l.facebook.com/l.php*" in SUBSCRIPTIONS
    assert "*://www.google.com/imgres*" in SUBSCRIPTIONS
    assert "*://www.google.com/url*" in SUBSCRIPTIONS


def test_custom_registry():
    registry = {"b.example": {"/x": None, "/y": None}, "a.example": {"/": None}}
    assert build_subscriptions(registry) == [
        "*://b.example/x*",
        "*://b.example/y*",
        "*://a.example/*",
    ]
