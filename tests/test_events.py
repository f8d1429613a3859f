from src.film_draft.domain.entities.palette import COLOR_OPTIONS, find_color_option, next_free_color
from src.film_draft.domain.events import StateChannel


class TestStateChannel:
    """Synchronous publish/subscribe with replay"""

    def test_no_replay_before_first_publish(self):
        channel = StateChannel("test")
        received = []
        channel.subscribe(received.append)
        assert received == []
        assert not channel.has_value

        channel.publish(1)
        assert received == [1]
        assert channel.value == 1

    def test_replay_latest_value(self):
        channel = StateChannel("test")
        channel.publish(1)
        channel.publish(2)
        received = []
        channel.subscribe(received.append)
        assert received == [2]

        silent = []
        channel.subscribe(silent.append, replay=False)
        assert silent == []

    def test_subscriber_may_unsubscribe_itself(self):
        channel = StateChannel("test")
        received = []
        unsubscribe = None

        def once(value):
            received.append(value)
            unsubscribe()

        unsubscribe = channel.subscribe(once)
        channel.publish("a")
        channel.publish("b")
        assert received == ["a"]
        assert channel.subscriber_count == 0

    def test_clear_subscribers(self):
        channel = StateChannel("test")
        channel.subscribe(lambda value: None)
        channel.subscribe(lambda value: None)
        channel.clear_subscribers()
        assert channel.subscriber_count == 0


class TestPalette:
    """Selector colours"""

    def test_next_free_color(self):
        assert next_free_color(set()) == COLOR_OPTIONS[0]
        assert next_free_color({"#673ab7"}) == COLOR_OPTIONS[1]
        assert next_free_color({option.value.lower() for option in COLOR_OPTIONS}) is None

    def test_find_color_option(self):
        assert find_color_option("#ff9800").contrast == "black"
        assert find_color_option("#000000") is None
