import os
import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq
from dataclasses import fields
from typing import List

class ParquetWriter:
    def __init__(self, folder: str, schema, compression: str = 'brotli'):
        self.folder = folder
        self.schema = schema
        self.compression = compression
        os.makedirs(folder, exist_ok=True)
        self.counter = 0

    def write_batch(self, entries: List) -> str:
        if not entries:
            return None
        if not os.path.exists(self.folder):
            os.makedirs(self.folder)

        columns = [f.name for f in fields(self.schema)]
        df = pd.DataFrame([entry.to_dict() for entry in entries], columns=columns)
        file_path = os.path.join(self.folder, f"part-{self.counter:05d}.parquet")
        self.counter += 1

        table = pa.Table.from_pandas(df, preserve_index=False)
        pq.write_table(table, file_path, compression=self.compression)

        return file_path
