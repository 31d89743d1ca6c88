"""
NODE: Save Local
PURPOSE: Writes local backups of the generated horoscope: the full JSON in
         current_horoscope.txt and one current_<sign>.txt per sign.
INPUT: horoscope dict, output directory
OUTPUT: list of written file paths
"""

import json
import os

from utils.config import SAVE_FILE
from utils.logger import log_info


def execute(horoscope: dict, output_dir: str) -> list[str]:
    output_dir = output_dir or "."
    os.makedirs(output_dir, exist_ok=True)
    written = []

    save_path = os.path.join(output_dir, SAVE_FILE)
    with open(save_path, "w", encoding="utf-8") as f:
        json.dump(horoscope, f, indent=2, ensure_ascii=False)
    written.append(save_path)

    for sign in horoscope.get("signs", []):
        sign_path = os.path.join(output_dir, f"current_{sign['name'].lower()}.txt")
        with open(sign_path, "w", encoding="utf-8") as f:
            f.write(sign["text"])
        written.append(sign_path)

    log_info(f"[Save] ✓ {len(written)} backup file(s) in {output_dir}")
    return written
