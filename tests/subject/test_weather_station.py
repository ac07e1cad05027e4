import logging

from weather_station import HumidityDisplay, Measurement, Observer, TemperatureDisplay, WeatherStation


class RecordingObserver(Observer):
    def __init__(self, name, calls):
        self.name = name
        self.calls = calls

    def update(self, data):
        self.calls.append((self.name, data))


def test_no_measurement_before_first_update():
    station = WeatherStation()
    assert station.get_current_weather_data() is None


def test_set_measurements_notifies_each_observer_once_in_order():
    calls = []
    station = WeatherStation()
    station.register_observer(RecordingObserver("first", calls))
    station.register_observer(RecordingObserver("second", calls))

    station.set_measurements(25.0, 65.0, 1013.0)

    expected = Measurement(temperature=25.0, humidity=65.0, pressure=1013.0)
    assert calls == [("first", expected), ("second", expected)]
    assert station.get_current_weather_data() == expected


def test_two_argument_set_measurements_uses_standard_pressure():
    calls = []
    station = WeatherStation()
    station.register_observer(RecordingObserver("only", calls))

    station.set_measurements(10.0, 50.0)

    assert calls == [("only", Measurement(temperature=10.0, humidity=50.0, pressure=1013.25))]


def test_set_measurements_replaces_measurement():
    station = WeatherStation()
    station.set_measurements(10.0, 50.0)
    first = station.get_current_weather_data()

    station.set_measurements(12.0, 55.0, 1000.0)

    assert station.get_current_weather_data() is not first
    assert first == Measurement(temperature=10.0, humidity=50.0)


def test_identical_readings_trigger_a_full_cycle_each_time():
    calls = []
    station = WeatherStation()
    temperature = TemperatureDisplay()
    station.register_observer(temperature)
    station.register_observer(RecordingObserver("recorder", calls))

    station.set_measurements(20.0, 40.0, 1010.0)
    station.set_measurements(20.0, 40.0, 1010.0)

    assert len(calls) == 2
    assert calls[0][1] == calls[1][1]
    assert temperature.get_current_temperature() == 20.0


def test_removed_observer_is_not_notified():
    calls = []
    station = WeatherStation()
    recorder = RecordingObserver("recorder", calls)
    station.register_observer(recorder)
    station.remove_observer(recorder)

    station.set_measurements(1.0, 2.0, 3.0)

    assert calls == []
    assert station.get_observers() == []


def test_notify_before_any_measurement_delivers_none():
    calls = []
    station = WeatherStation()
    temperature = TemperatureDisplay()
    humidity = HumidityDisplay()
    station.register_observer(RecordingObserver("recorder", calls))
    station.register_observer(temperature)
    station.register_observer(humidity)

    station.notify_observers()

    assert calls == [("recorder", None)]
    assert temperature.get_current_temperature() == 0.0
    assert humidity.get_current_humidity() == 0.0


def test_temperature_then_humidity_scenario(caplog):
    caplog.set_level(logging.INFO)
    station = WeatherStation()
    temperature = TemperatureDisplay()
    humidity = HumidityDisplay()
    station.register_observer(temperature)
    station.register_observer(humidity)

    station.set_measurements(25.0, 65.0, 1013.0)

    assert temperature.get_current_temperature() == 25.0
    assert humidity.get_current_humidity() == 65.0

    rendered = [record.getMessage() for record in caplog.records
                if record.getMessage().endswith(("°C", "%")) and "display:" in record.getMessage()]
    assert rendered == ["Temperature display: 25.0 °C", "Humidity display: 65.0 %"]


def test_removed_display_keeps_last_value():
    station = WeatherStation()
    temperature = TemperatureDisplay()
    station.register_observer(temperature)

    station.set_measurements(10.0, 50.0)
    station.remove_observer(temperature)
    station.set_measurements(99.0, 99.0)

    assert temperature.get_current_temperature() == 10.0


def test_registry_changes_are_logged(caplog):
    caplog.set_level(logging.INFO, logger="weather_station")
    station = WeatherStation()
    display = TemperatureDisplay()

    station.register_observer(display)
    station.remove_observer(display)

    messages = [record.getMessage() for record in caplog.records]
    assert "New observer registered: TemperatureDisplay. Total observers: 1" in messages
    assert "Observer removed: TemperatureDisplay. Total observers: 0" in messages
