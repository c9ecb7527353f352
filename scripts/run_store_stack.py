#!/usr/bin/env python3
"""Convenience runner for the DB-Handler, Beverage API and Management API."""
from __future__ import annotations

import argparse
import os
import signal
import subprocess
import sys
import time
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

SERVICES = (
    ("db-handler", "backend.db_handler.app:create_app"),
    ("beverage-api", "backend.beverage_api.app:create_app"),
    ("management-api", "backend.management_api.app:create_app"),
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Start the three store catalog services locally with a single command."
    )
    parser.add_argument("--host", default="127.0.0.1", help="Host interface for every service")
    parser.add_argument("--db-port", type=int, default=9999, help="Port for the DB-Handler")
    parser.add_argument("--beverage-port", type=int, default=8080, help="Port for the Beverage API")
    parser.add_argument(
        "--management-port", type=int, default=8090, help="Port for the Management API"
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        default=PROJECT_ROOT / "data" / "beverages.json",
        help="JSON file used by the DB-Handler file backend",
    )
    parser.add_argument(
        "--no-reload",
        dest="reload",
        action="store_false",
        help="Disable uvicorn auto-reload (enabled by default)",
    )
    parser.set_defaults(reload=True)
    return parser.parse_args()


def log(message: str) -> None:
    print(f"[store-stack] {message}")


def build_command(factory: str, host: str, port: int, reload: bool) -> list[str]:
    command = [
        sys.executable,
        "-m",
        "uvicorn",
        factory,
        "--factory",
        "--host",
        host,
        "--port",
        str(port),
    ]
    if reload:
        command.append("--reload")
    return command


def launch_processes(commands: list[tuple[str, list[str]]], env: dict[str, str]) -> list[subprocess.Popen]:
    processes: list[subprocess.Popen] = []
    for name, command in commands:
        log(f"Starting {name}...")
        processes.append(subprocess.Popen(command, cwd=str(PROJECT_ROOT), env=env))
    return processes


def stop_processes(processes: list[subprocess.Popen]) -> None:
    for proc in processes:
        if proc.poll() is None:
            proc.terminate()
    for proc in processes:
        try:
            proc.wait(timeout=10)
        except subprocess.TimeoutExpired:
            proc.kill()


def forward_signals(processes: list[subprocess.Popen]) -> None:
    def _handler(signum: int, _frame) -> None:
        log(f"Received signal {signum}; shutting down...")
        stop_processes(processes)
        sys.exit(0)

    signal.signal(signal.SIGINT, _handler)
    signal.signal(signal.SIGTERM, _handler)


def monitor(processes: list[subprocess.Popen]) -> None:
    try:
        while True:
            for proc in processes:
                returncode = proc.poll()
                if returncode is not None:
                    raise SystemExit(returncode)
            time.sleep(0.5)
    except KeyboardInterrupt:
        log("Interrupted by user; stopping processes...")
    finally:
        stop_processes(processes)


def main() -> None:
    args = parse_args()

    env = os.environ.copy()
    pythonpath = env.get("PYTHONPATH", "")
    if pythonpath:
        env["PYTHONPATH"] = f"{PROJECT_ROOT}{os.pathsep}{pythonpath}"
    else:
        env["PYTHONPATH"] = str(PROJECT_ROOT)

    db_url = f"http://{args.host}:{args.db_port}/v1/beverages"
    env.setdefault("DB_HANDLER_DATA_FILE", str(args.data_file))
    env.setdefault("BEVERAGE_API_DB_HANDLER_URL", db_url)
    env.setdefault("MANAGEMENT_API_DB_HANDLER_URL", db_url)

    ports = (args.db_port, args.beverage_port, args.management_port)
    commands = [
        (name, build_command(factory, args.host, port, args.reload))
        for (name, factory), port in zip(SERVICES, ports)
    ]

    processes = launch_processes(commands, env)
    forward_signals(processes)
    log(
        "Store stack ready. Beverage API on "
        f"http://{args.host}:{args.beverage_port}, Management API on "
        f"http://{args.host}:{args.management_port}, DB-Handler on {db_url}."
    )
    monitor(processes)


if __name__ == "__main__":  # pragma: no cover - manual entrypoint
    main()
