from minigin.transform import Transform, Vec3


def test_default_position_is_origin():
    assert Transform().position == Vec3(0.0, 0.0, 0.0)


def test_set_position_round_trip():
    transform = Transform()
    transform.set_position(216, 180, 0)
    assert transform.position == (216.0, 180.0, 0.0)
    assert transform.position.x == 216
    assert transform.position.y == 180
    assert transform.position.z == 0


def test_set_position_overwrites():
    transform = Transform()
    transform.set_position(1.5, 2.5, 3.5)
    transform.set_position(-4.0, 5.0, 6.0)
    assert transform.position == Vec3(-4.0, 5.0, 6.0)


def test_transforms_are_independent():
    a = Transform()
    b = Transform()
    a.set_position(7, 8, 9)
    assert b.position == Vec3()