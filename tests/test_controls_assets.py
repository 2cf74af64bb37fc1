from PIL import Image

from arena.assets import AssetManager
from arena.controls import Action, KeyboardInputController, ScriptedInput


def test_keyboard_maps_bound_keys():
    keyboard = KeyboardInputController({87: Action.UP, 32: Action.FIRE})
    keyboard.on_key_press(87)
    keyboard.on_key_press(999)
    assert keyboard.is_pressed(Action.UP)
    assert not keyboard.is_pressed(Action.FIRE)
    keyboard.on_key_release(87)
    assert not keyboard.is_pressed(Action.UP)


def test_reset_clears_held_actions():
    keyboard = KeyboardInputController({87: Action.UP})
    keyboard.on_key_press(87)
    keyboard.reset()
    assert not keyboard.is_pressed(Action.UP)


def test_scripted_input_accepts_names():
    inp = ScriptedInput()
    inp.set_pressed(["FIRE", Action.UP])
    assert inp.is_pressed(Action.FIRE)
    assert inp.is_pressed(Action.UP)
    inp.set_pressed([])
    assert not inp.is_pressed(Action.FIRE)


def test_missing_image_is_none():
    assets = AssetManager()
    assert assets.get_image("icons") is None
    assert assets.get_image("icons") is None


def test_loads_images_by_stem(tmp_path):
    Image.new("RGBA", (16, 24)).save(tmp_path / "icons.png")
    (tmp_path / "notes.txt").write_text("not an image")
    assets = AssetManager()
    assets.init(str(tmp_path))
    assert set(assets.images) == {"icons"}
    assert assets.get_image("icons").size == (16, 24)


def test_missing_directory_is_tolerated(tmp_path):
    assets = AssetManager()
    assets.init(str(tmp_path / "nope"))
    assets.init(None)
    assert assets.images == {}
