from mintengine.renderer import Renderer


class _FakeWindow:
    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append("clear")

    def draw(self, drawable):
        self.calls.append(("draw", drawable))

    def display(self):
        self.calls.append("display")


def test_render_without_window_keeps_queue():
    renderer = Renderer()
    renderer.submit("drawable")
    renderer.render()
    assert len(renderer) == 1


def test_render_draws_in_submission_order():
    renderer = Renderer()
    window = _FakeWindow()
    renderer.create(window)
    first, second = object(), object()
    renderer.submit(first)
    renderer.submit(second)
    renderer.render()
    assert window.calls == ["clear", ("draw", first), ("draw", second), "display"]


def test_render_empties_queue():
    renderer = Renderer()
    window = _FakeWindow()
    renderer.create(window)
    renderer.submit(object())
    renderer.render()
    assert len(renderer) == 0
    window.calls.clear()
    renderer.render()
    assert window.calls == ["clear", "display"]


def test_create_attaches_window():
    renderer = Renderer()
    window = _FakeWindow()
    renderer.create(window)
    assert renderer.window is window