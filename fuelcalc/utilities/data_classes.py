from dataclasses import dataclass, field, asdict
from typing import Optional, List, Tuple


@dataclass(frozen=True)
class WeatherSample:
    """One forecast step fed to the multi-day drying simulation.

    Attributes:
        temp_f: Air temperature (F).
        rel_humidity: Relative humidity (%, 0-100). Clamped by the model.
        wind_mph: Wind speed (mph). Carried for reporting only.
        hours: Length of the drying period for this step (hours).
        label: Display label, e.g. "Day 1". Filled in by the driver if empty.
    """
    temp_f: float
    rel_humidity: float
    wind_mph: float = 0.0
    hours: float = 12.0
    label: Optional[str] = None


@dataclass(frozen=True)
class FuelMoistureState:
    """Dead fuel moisture (%) of the three time-lag classes."""
    one_hour: float
    ten_hour: float
    hundred_hour: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.one_hour, self.ten_hour, self.hundred_hour)


@dataclass(frozen=True)
class FuelPreset:
    """Calibration of one fuel type for the rate of spread approximation.

    Attributes:
        name: Preset key, e.g. "pasture_grass".
        display_name: Human readable name.
        description: Short description of the fuel bed.
        base_ros: Rate of spread (ch/h) at 9% 1-hr moisture, 5 mph wind and 0% slope.
        wind_sensitivity: How strongly wind increases spread (>= 0).
        moisture_sensitivity: How strongly moisture suppresses spread (>= 0).
    """
    name: str
    display_name: str
    description: str
    base_ros: float
    wind_sensitivity: float
    moisture_sensitivity: float


@dataclass
class DailyResult:
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
class SimulationSummary:
    first_critical_day: Optional[str]
    final_1hr: float
    final_10hr: float


@dataclass
class MultiDayResults:
    initial_1hr: float
    initial_10hr: float
    daily_results: List[DailyResult] = field(default_factory=list)
    summary: Optional[SimulationSummary] = None


@dataclass
class HourlyResult:
    hour: int
    period: str
    emc: float
    m1: float
    m10: float
    m100: float
    ros_ch_h: float
    ros_ft_min: float

    def to_dict(self):
        return asdict(self)


@dataclass
class DiurnalSummary:
    min_m1_hour: int
    min_m1_value: float
    max_ros_ch_h: float
    max_ros_ft_min: float
    end_of_day_m1: float
    end_of_24h_m1: float
    fuel_name: str


@dataclass
class DiurnalResults:
    initial: FuelMoistureState
    hourly: List[HourlyResult] = field(default_factory=list)
    summary: Optional[DiurnalSummary] = None


@dataclass(frozen=True)
class DangerRating:
    level: str
    color: str
    description: str


@dataclass
class FireBehavior:
    """Fire behavior estimate for current conditions.

    Attributes:
        emc: Equilibrium moisture content (%) of the current weather.
        m1: 1-hr fuel moisture (%) after relaxing toward 'emc'.
        ros_ch_h: Rate of spread (ch/h).
        ros_ft_min: Rate of spread (ft/min).
        danger: Categorical danger rating of the current weather.
        fuel_name: Display name of the fuel preset used.
    """
    emc: float
    m1: float
    ros_ch_h: float
    ros_ft_min: float
    danger: DangerRating
    fuel_name: str


@dataclass
class DiurnalParams:
    day_temp_f: float
    day_min_rh: float
    night_temp_f: float
    night_max_rh: float
    rain_in: float = 0.0
    wind_mph: float = 5.0
    fuel: str = "leaf_pine_litter"


@dataclass
class MultiDayParams:
    initial_1hr: float = 8.0
    initial_10hr: float = 10.0
    steps: List[WeatherSample] = field(default_factory=list)


@dataclass
class ScenarioParams:
    """Everything needed to run one scenario from a .cfg file.

    Exactly one of 'multi_day' and 'diurnal' is populated, matching 'scenario_type'.
    """
    scenario_type: str
    label: str = ""
    multi_day: Optional[MultiDayParams] = None
    diurnal: Optional[DiurnalParams] = None
    log_folder: Optional[str] = None
    plot: bool = False
    config_path: Optional[str] = None
