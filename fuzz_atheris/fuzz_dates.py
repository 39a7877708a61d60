#!/usr/bin/env python3
"""Free-Text Date/Time Parsing and Formatting Fuzzer (Atheris).

Targets: laxdate.parsing, laxdate.formatting
Checks that the parse and format entry points never raise on arbitrary
input and that every parse result is a plain naive datetime.

Built for Python 3.13+.
"""

from __future__ import annotations

import atexit
import json
import logging
import sys
from datetime import datetime

# --- PEP 695 Type Aliases ---
type FuzzStats = dict[str, int | str]

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0}

def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)

atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    sys.exit(1)

logging.getLogger("laxdate").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["laxdate"]):
    from laxdate.formatting import format_datetime, moment_to_fp_format
    from laxdate.parsing import parse_date, parse_time

# Fixed reference time keeps findings reproducible
REFERENCE_NOW = datetime(2024, 6, 15, 9, 45, 30)

SEED_INPUTS = [
    "5 Jan 99", "jan/5/30", "3 30 05", "20010203", "010203",
    "tomorrow", "fri. 3/4 1:30pm", "132pm", "12:15 am", "5 févr. 2024",
]

TEMPLATES = [
    "YYYY-MM-DD", "YYYY-MMM-DD", "h:mm A", "dddd, MMMM D [at] HH:mm:ss.SSS",
]

def test_one_input(data: bytes) -> None:
    """Atheris entry point: parse then format arbitrary date text."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)

    # 1. Inputs
    input_str = (
        fdp.PickValueInList(SEED_INPUTS) + fdp.ConsumeUnicodeNoSurrogates(8)
        if fdp.ConsumeBool()
        else fdp.ConsumeUnicodeNoSurrogates(64)
    )
    template = (
        fdp.PickValueInList(TEMPLATES)
        if fdp.ConsumeBool()
        else fdp.ConsumeUnicodeNoSurrogates(20)
    )

    # 2. Execution
    try:
        result, errors = parse_date(input_str, now=REFERENCE_NOW)
        if result is None:
            assert len(errors) == 1
        else:
            assert errors == ()
            assert isinstance(result, datetime)
            assert result.tzinfo is None
            assert result.microsecond == 0
            assert isinstance(format_datetime(result, template), str)

        clock = parse_time(input_str, now=REFERENCE_NOW)
        if clock is not None:
            assert 0 <= clock.hour <= 23

        assert moment_to_fp_format(template) == moment_to_fp_format(template)

    except Exception:
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        raise

if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
