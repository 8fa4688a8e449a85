import pygame
import pytest

from mintengine.animation import AnimationData, Animation
from mintengine.assets import Texture2D


@pytest.fixture
def texture():
    return Texture2D(pygame.Surface((288, 96)))


def test_from_data_builds_row_of_frames(texture):
    data = AnimationData(
        texture=texture, frame_number=6, frame_y=48, frame_width=48, frame_height=48, frame_time=0.1
    )
    animation = Animation.from_data(data)
    assert len(animation) == 6
    assert animation.spritesheet is texture
    assert animation.frame_time == 0.1
    assert animation.frame(0).topleft == (0, 48)
    for previous, current in zip(animation.frames, animation.frames[1:]):
        assert current.left == previous.right
        assert current.top == previous.top
        assert current.size == (48, 48)


def test_from_data_with_no_frames_is_not_created(texture):
    animation = Animation.from_data(AnimationData(texture=texture))
    assert len(animation) == 0
    assert animation.is_created() is False


def test_from_texture_covers_whole_texture(texture):
    animation = Animation.from_texture(texture)
    assert len(animation) == 1
    assert animation.frame(0) == pygame.Rect((0, 0), texture.size())
    assert animation.frame_time == 1.0
    assert animation.is_created()


def test_default_animation_is_empty():
    animation = Animation()
    assert animation.spritesheet is None
    assert animation.frame_time == 0.0
    assert len(animation) == 0
    assert animation.is_created() is False


def test_frames_without_texture_not_created():
    animation = Animation()
    animation.add_frame((0, 0, 4, 4))
    assert animation.is_created() is False


def test_add_frame_accepts_tuple_and_rect(texture):
    animation = Animation(texture, 0.5)
    animation.add_frame((1, 2, 3, 4))
    animation.add_frame(pygame.Rect(5, 6, 7, 8))
    assert animation.frame(0) == pygame.Rect(1, 2, 3, 4)
    assert animation.frame(1) == pygame.Rect(5, 6, 7, 8)
    assert animation.is_created()


@pytest.mark.parametrize("index", [1, 5, -1])
def test_frame_out_of_range_raises(texture, index):
    animation = Animation(texture)
    animation.add_frame((0, 0, 2, 2))
    with pytest.raises(IndexError):
        animation.frame(index)