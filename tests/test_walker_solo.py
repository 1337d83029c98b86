from raygames.walker.solo import Walker


def make_walker(x=600.0):
    return Walker(1200, 150, x, 325)


def test_right_moves_and_faces_right():
    walker = make_walker()
    walker.is_moving_right = False
    before = walker.x
    walker.handle_movement(False, True)
    assert walker.x == before + walker.speed
    assert walker.is_moving_right is True


def test_left_moves_and_faces_left():
    walker = make_walker()
    before = walker.x
    walker.handle_movement(True, False)
    assert walker.x == before - walker.speed
    assert walker.is_moving_right is False


def test_no_keys_keeps_position_and_facing():
    walker = make_walker()
    walker.handle_movement(True, False)
    position = walker.x
    walker.handle_movement(False, False)
    assert walker.x == position
    assert walker.is_moving_right is False


def test_clamped_to_screen():
    walker = make_walker(5000)
    walker.handle_movement(False, False)
    assert walker.x == 1200 - 150
    walker.x = -3
    walker.handle_movement(False, False)
    assert walker.x == 0


def test_frames_swap_while_moving():
    walker = make_walker()
    assert walker.update_animation(True, 0.1) == 0
    assert walker.update_animation(True, 0.15) == 1
    assert walker.animation_time == 0.0
    assert walker.update_animation(True, 0.25) == 0


def test_standing_resets_frame():
    walker = make_walker()
    walker.update_animation(True, 0.25)
    assert walker.frame == 1
    assert walker.update_animation(False, 0.25) == 0