from minigin.scene import Scene
from minigin.scene_manager import SceneManager


class _Recorder:
    def __init__(self, log, label):
        self.log = log
        self.label = label

    def update(self, delta_time):
        self.log.append((self.label, "update", delta_time))

    def fixed_update(self, fixed_time_step):
        self.log.append((self.label, "fixed_update", fixed_time_step))

    def render(self):
        self.log.append((self.label, "render"))


def _manager_with_two_scenes(log):
    manager = SceneManager()
    manager.create_scene("first").add(_Recorder(log, "a"))
    manager.create_scene("second").add(_Recorder(log, "b"))
    return manager


def test_create_scene_returns_named_kept_scene():
    manager = SceneManager()
    scene = manager.create_scene("Demo")
    assert isinstance(scene, Scene)
    assert scene.name == "Demo"
    assert manager.scenes == (scene,)


def test_scenes_kept_in_creation_order():
    manager = SceneManager()
    first = manager.create_scene("first")
    second = manager.create_scene("second")
    assert manager.scenes == (first, second)


def test_update_reaches_all_scenes():
    log = []
    _manager_with_two_scenes(log).update(0.25)
    assert log == [("a", "update", 0.25), ("b", "update", 0.25)]


def test_fixed_update_reaches_all_scenes():
    log = []
    _manager_with_two_scenes(log).fixed_update(0.02)
    assert log == [("a", "fixed_update", 0.02), ("b", "fixed_update", 0.02)]


def test_render_reaches_all_scenes():
    log = []
    _manager_with_two_scenes(log).render()
    assert log == [("a", "render"), ("b", "render")]


def test_get_instance_is_shared():
    scene = SceneManager.get_instance().create_scene("Shared")
    scenes = SceneManager.get_instance().scenes
    assert scenes[-1] == scene
    assert scenes[-1].name == "Shared"