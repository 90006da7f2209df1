"""
Tests for the sound bank. The mixer itself is never started.
"""

from wall_invaders.audio import Sounds


class FakeSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


def test_unknown_sound_is_silent():
    sounds = Sounds()

    sounds.play_sound("shoot")


def test_load_without_mixer_leaves_slot_empty(tmp_path):
    sounds = Sounds()

    sounds.load_sound("bang", tmp_path / "bang.wav")
    sounds.play_sound("bang")

    assert sounds.sounds == {"bang": None}


def test_loaded_sound_plays_unless_muted():
    sounds = Sounds()
    fake = FakeSound()
    sounds.sounds["explosion"] = fake

    sounds.play_sound("explosion")
    sounds.mute = True
    sounds.play_sound("explosion")

    assert fake.plays == 1
