from dataclasses import dataclass, asdict

@dataclass
class DailyLogEntry:
    run: int
    step: int
    day: str
    temp_f: float
    rel_humidity: float
    wind_mph: float
    hours: float
    emc: float
    moisture_1hr: float
    moisture_10hr: float

    def to_dict(self):
        return asdict(self)

@dataclass
class HourlyLogEntry:
    run: int
    hour: int
    period: str
    fuel: str
    emc: float
    m1: float
    m10: float
    m100: float
    ros_ch_h: float
    ros_ft_min: float

    def to_dict(self):
        return asdict(self)
