from spritepacker import Rectangle


def test_intersects():
    a = Rectangle(10, 10, 0, 0)
    b = Rectangle(10, 10, 5, 5)
    c = Rectangle(10, 10, 20, 20)

    assert a.intersects(b)
    assert b.intersects(a)
    assert not a.intersects(c)


def test_shared_edge_is_not_an_intersection():
    a = Rectangle(10, 10, 0, 0)
    assert not a.intersects(Rectangle(10, 10, 10, 0))
    assert not a.intersects(Rectangle(10, 10, 0, 10))
    assert not a.intersects(Rectangle(10, 10, 10, 10))


def test_contains():
    outer = Rectangle(20, 20, 0, 0)
    inner = Rectangle(5, 5, 5, 5)
    partial = Rectangle(10, 10, 15, 15)

    assert outer.contains(inner)
    assert not inner.contains(outer)
    assert not outer.contains(partial)
    assert outer.contains(outer)
    assert outer.contains(Rectangle(20, 5, 0, 15))


def test_area_and_edges():
    rect = Rectangle(70000, 70000, 3, 4)
    assert rect.area() == 4900000000
    assert rect.right == 70003
    assert rect.bottom == 70004


def test_equality():
    assert Rectangle(5, 6, 1, 2) == Rectangle(5, 6, 1, 2)
    assert Rectangle(5, 6, 1, 2) != Rectangle(6, 5, 1, 2)
    assert len({Rectangle(5, 6, 1, 2), Rectangle(5, 6, 1, 2)}) == 1
