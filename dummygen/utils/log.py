import logging
import time


def phase_log(logger: logging.Logger, operation: str, key: str, phase: str, status: str, msg: str = ""):
    # Format: SERVICE, OPERATION, PATH, START/END, Status, MSG
    logger.debug(f"GEN,{operation},{key},{phase},{status},{msg}")


def ms_since(ns_start: int) -> float:
    return (time.perf_counter_ns() - ns_start) / 1e6
