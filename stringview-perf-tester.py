#!.venv/bin/python

import logging
from logging import info, warning
import statistics
import sys
import time
import tomllib
from pathlib import Path

import config
from chopview import constants
from chopview.extract import extract_tokens
from chopview.stringview import StringView

TEXTS = {
    "small_ascii": "hello world",
    "large_ascii": "hello world" * 100,
    "small_mixed": "Hello 👋 世界",
    "large_mixed": "Hello 👋 世界 " * 100,
    "whitespace": "   \t\n\rHello   World   \t\n\r",
    "integers": "123 -456 +789 abc 101112",
    "floats": "123.456 -789.012 +345.678 abc 901.234",
    "complex_emoji": "👨‍👩‍👧‍👦 👨🏻‍💻 🏳️‍🌈",
}

GREETING = extract_tokens("Hello ", int, " World ", float, " ", str)


def chop_numbers(text, chop):
    sv = StringView(text)
    while sv.size:
        if not chop(sv):
            sv.chop_left(1)
        sv.trim_left()


def split_all(text):
    sv = StringView(text)
    while sv.size:
        sv.chop_by_delimiter(" ")


OPERATIONS = {
    "create": lambda text: StringView(text),
    "char_at": lambda text: [StringView(text).char_at(i) for i in range(10)],
    "iterate": lambda text: sum(1 for _ in StringView(text)),
    "trim": lambda text: StringView(text).trim(),
    "chop_int": lambda text: chop_numbers(text, StringView.chop_int),
    "chop_float": lambda text: chop_numbers(text, StringView.chop_float),
    "chop_by_delimiter": split_all,
}


def load_cases(path):
    with open(path, "rb") as f:
        data = tomllib.load(f)
    cases = {}
    for name, case in data.get("cases", {}).items():
        if "text" not in case:
            warning(f"Case {name} in {path} has no text, skipping")
            continue
        cases[name] = case["text"]
    info(f"Loaded {len(cases)} cases from {path}")
    return cases


def bench(fn, arg, warmup, runs):
    for _ in range(warmup):
        fn(arg)
    times = []
    for _ in range(runs):
        t = time.perf_counter()
        fn(arg)
        times.append(time.perf_counter() - t)
    return times


def format_time(seconds):
    if seconds < 1e-6:
        return f"{seconds * 1e9:.2f}ns"
    if seconds < 1e-3:
        return f"{seconds * 1e6:.2f}µs"
    return f"{seconds * 1e3:.2f}ms"


def report(name, times):
    info(
        f"{name}: mean {format_time(statistics.fmean(times))} "
        f"± {format_time(statistics.pstdev(times))} "
        f"(min {format_time(min(times))}, max {format_time(max(times))})"
    )


def main():
    logging.basicConfig(stream=sys.stderr, level=config.log_level, format=constants.LOG_FORMAT)
    warmup = getattr(config, "warmup", constants.DEFAULT_WARMUP)
    runs = getattr(config, "runs", constants.DEFAULT_RUNS)
    texts = dict(TEXTS)
    if config.cases_path is not None:
        texts |= load_cases(Path(config.cases_path))

    info(f"Running {len(OPERATIONS)} operations over {len(texts)} inputs ({warmup} warmup, {runs} runs)")
    for op_name, fn in OPERATIONS.items():
        for text_name, text in texts.items():
            report(f"{op_name}/{text_name}", bench(fn, text, warmup, runs))
    report("extract", bench(GREETING, "Hello 123 World 456.789 Foo", warmup, runs))
    return 0


if __name__ == "__main__":
    sys.exit(main())
