import os
from fuelcalc.utilities.logger_schemas import DailyLogEntry, HourlyLogEntry
from fuelcalc.utilities.parquet_writer import ParquetWriter
from fuelcalc.utilities.data_classes import DiurnalResults, MultiDayResults, ScenarioParams
import pyarrow as pa
import pyarrow.parquet as pq
import dataclasses
import datetime
import numpy as np
import json
import pandas as pd
import glob
import shutil

class SimulationLogger:
    """Writes simulation results to Parquet with a JSON status log.

    Each logger owns a timestamped session folder. Every call to :meth:`start_new_run`
    opens a ``run_N`` sub-folder; result rows are cached, flushed in batches to part files
    and merged into ``daily_logs.parquet`` / ``hourly_logs.parquet`` when the run is closed.
    Messages and summaries go to ``status_log.json`` in the run folder.
    """
    def __init__(self, log_folder: str):

        self.log_ctr = 0

        self.log_folder = log_folder
        os.makedirs(self.log_folder, exist_ok=True)

        self._session_folder = self.generate_session_folder()
        os.makedirs(self._session_folder, exist_ok=True)

        self._run_folder = None
        self.daily_writer = None
        self.hourly_writer = None

        self._daily_cache = []
        self._hourly_cache = []

        self._status_log = None

    @property
    def session_folder(self) -> str:
        return self._session_folder

    @property
    def run_folder(self) -> str:
        return self._run_folder

    def start_new_run(self) -> int:
        if self._run_folder is not None:
            self._close_run()

        run_idx = self.log_ctr
        self._run_folder = os.path.join(self._session_folder, f"run_{run_idx}")
        os.makedirs(self._run_folder, exist_ok=True)

        self.daily_writer = ParquetWriter(
            os.path.join(self._run_folder, "daily_logs"), schema=DailyLogEntry
        )

        self.hourly_writer = ParquetWriter(
            os.path.join(self._run_folder, "hourly_logs"), schema=HourlyLogEntry
        )

        self._status_log = {
            "run_start": datetime.datetime.now().isoformat(),
            "messages": [],
            "latest_flush": None,
            "results": None
        }

        self.log_ctr += 1

        return run_idx

    def log_multi_day(self, results: MultiDayResults):
        if self._run_folder is None:
            self.start_new_run()

        run_idx = self.log_ctr - 1
        entries = [
            DailyLogEntry(run=run_idx, step=i, **day.to_dict())
            for i, day in enumerate(results.daily_results)
        ]
        self._daily_cache.extend(entries)

        self._status_log["results"] = {
            "scenario": "multi_day",
            "initial 1hr (%)": results.initial_1hr,
            "initial 10hr (%)": results.initial_10hr,
            "steps": len(results.daily_results),
            "summary": results.summary
        }

    def log_24_hour(self, results: DiurnalResults, fuel: str):
        if self._run_folder is None:
            self.start_new_run()

        run_idx = self.log_ctr - 1
        entries = [
            HourlyLogEntry(run=run_idx, fuel=fuel, **hour.to_dict())
            for hour in results.hourly
        ]
        self._hourly_cache.extend(entries)

        self._status_log["results"] = {
            "scenario": "24_hour",
            "initial moisture (%)": results.initial,
            "summary": results.summary
        }

    def log_message(self, message: str):
        if self._run_folder is None:
            self.start_new_run()

        timestamp = datetime.datetime.now().isoformat()
        entry = f"[{timestamp}]: {message}"
        self._status_log["messages"].append(entry)

    def flush(self):
        if self._run_folder is None:
            return

        self.daily_writer.write_batch(self._daily_cache)
        self._daily_cache.clear()

        self.hourly_writer.write_batch(self._hourly_cache)
        self._hourly_cache.clear()

        self._status_log["latest_flush"] = datetime.datetime.now().isoformat()
        self._write_status_log()

    def finish(self):
        if self._run_folder is not None:
            self._close_run()

    def _close_run(self):
        self.flush()

        daily_log_path = self.daily_writer.folder
        hourly_log_path = self.hourly_writer.folder

        self._merge_parquet_files(
            daily_log_path,
            os.path.join(self._run_folder, "daily_logs.parquet")
        )

        self._merge_parquet_files(
            hourly_log_path,
            os.path.join(self._run_folder, "hourly_logs.parquet")
        )

        # Delete the part folders after merging
        if os.path.exists(daily_log_path):
            shutil.rmtree(daily_log_path)

        if os.path.exists(hourly_log_path):
            shutil.rmtree(hourly_log_path)

        self._run_folder = None

    def _merge_parquet_files(self, folder_path: str, output_file: str) -> bool:

        parquet_files = sorted(glob.glob(os.path.join(folder_path, "part-*.parquet")))

        if not parquet_files:
            return False

        dfs = [pd.read_parquet(f) for f in parquet_files]
        combined_df = pd.concat(dfs, ignore_index=True)

        table = pa.Table.from_pandas(combined_df, preserve_index=False)
        pq.write_table(table, output_file, compression='snappy')

        return True

    def generate_session_folder(self) -> str:
        """Generates the path for the current session's log files based on current datetime

        :return: Session folder path string
        :rtype: str
        """
        date_time_str = datetime.datetime.now().strftime('%d-%b-%Y-%H-%M-%S-%f')
        return os.path.join(self.log_folder, f"log_{date_time_str}")

    def log_metadata(self, params: ScenarioParams):
        metadata = {
            "scenario": {
                "type": params.scenario_type,
                "label": params.label,
                "config file": params.config_path
            },
            "inputs": params.multi_day if params.multi_day is not None else params.diurnal,
            "written": datetime.datetime.now()
        }

        safe_dict = make_json_serializable(metadata)

        metadata_path = os.path.join(self._session_folder, "metadata.json")
        with open(metadata_path, 'w') as f:
            json.dump(safe_dict, f, indent=2)

    def _write_status_log(self):
        status_path = os.path.join(self._run_folder, "status_log.json")
        with open(status_path, 'w') as f:
            json.dump(make_json_serializable(self._status_log), f, indent = 2)

def make_json_serializable(obj):
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return make_json_serializable(dataclasses.asdict(obj))
    elif isinstance(obj, dict):
        return {k: make_json_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [make_json_serializable(item) for item in obj]
    elif isinstance(obj, tuple):
        return [make_json_serializable(item) for item in obj]
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, np.generic):
        return obj.item()
    elif isinstance(obj, datetime.datetime):
        return obj.isoformat()
    elif isinstance(obj, datetime.date):
        return obj.isoformat()
    elif hasattr(obj, '__dict__'):
        return str(obj)
    else:
        return obj
