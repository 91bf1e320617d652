import logging

from fourinarow.debug import DebugLevel, DebugManager


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


def make_manager(name):
    manager = DebugManager(name)
    handler = ListHandler()
    manager.logger.addHandler(handler)
    return manager, handler


def test_level_filters_messages():
    manager, handler = make_manager("fourinarow.test.level")
    manager.configure(level=DebugLevel.INFO)
    manager.info("shown", "game")
    manager.debug("hidden", "game")
    assert handler.messages == ["[game] shown"]


def test_component_filter():
    manager, handler = make_manager("fourinarow.test.components")
    manager.configure(level=DebugLevel.DEBUG, components=["board"])
    manager.debug("kept", "board")
    manager.debug("dropped", "web")
    assert handler.messages == ["[board] kept"]


def test_none_level_is_silent():
    manager, handler = make_manager("fourinarow.test.none")
    manager.configure(level=DebugLevel.NONE)
    manager.error("nothing")
    assert handler.messages == []


def test_set_from_string():
    manager, _ = make_manager("fourinarow.test.string")
    manager.set_from_string("Trace")
    assert manager.level == DebugLevel.TRACE
    manager.set_from_string("loud")
    assert manager.level == DebugLevel.TRACE


def test_timer():
    manager, _ = make_manager("fourinarow.test.timer")
    assert manager.end_timer("never") is None
    manager.start_timer("scan")
    assert manager.end_timer("scan") >= 0
