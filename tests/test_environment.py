from monlox.types.environment import Environment
from monlox.types.objects import Number, String


def test_get_missing_name():
    env = Environment()
    assert env.get("x") == (None, False)
    assert "x" not in env


def test_set_then_get():
    env = Environment()
    value = Number(1)
    assert env.set("x", value) is value
    assert env.get("x") == (value, True)
    assert "x" in env


def test_set_overwrites_local_binding():
    env = Environment()
    env.set("x", Number(1))
    env.set("x", Number(2))
    assert env.get("x")[0].value == 2


def test_lookup_walks_outward():
    root = Environment()
    root.set("x", Number(1))
    child = Environment.enclosed(root)
    grandchild = Environment.enclosed(child)
    assert grandchild.get("x")[0].value == 1
    assert grandchild.outer is child and child.outer is root


def test_set_in_child_shadows_without_touching_parent():
    root = Environment()
    root.set("x", Number(1))
    child = Environment.enclosed(root)
    child.set("x", Number(2))
    assert child.get("x")[0].value == 2
    assert root.get("x")[0].value == 1


def test_siblings_share_parent_but_not_locals():
    root = Environment()
    a = Environment.enclosed(root)
    b = Environment.enclosed(root)
    a.set("only_a", Number(1))
    root.set("shared", Number(2))
    assert b.get("only_a") == (None, False)
    assert a.get("shared")[0].value == 2
    assert b.get("shared")[0].value == 2


def test_str_and_repr():
    root = Environment()
    root.set("a", Number(1))
    child = Environment.enclosed(root)
    child.set("b", String("x"))
    assert str(root) == "{a: 1}"
    assert str(child) == "{b: x} -> ..."
    assert repr(child) == "<Environment chain: {b: x} -> {a: 1}>"
    assert list(child) == ["b"]
