import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[3]
DATA_DIR = Path(os.environ.get("CANIRUN_DATA_DIR", BASE_DIR / "data"))

BENCH_CPU_PATH = DATA_DIR / "bench_cpu.csv"
BENCH_GPU_PATH = DATA_DIR / "bench_gpu.csv"

# Written by the OS scanner binaries: "<PREFIX>:<base64 json>"
PAYLOAD_PREFIX = os.environ.get("CANIRUN_PAYLOAD_PREFIX", "DINAU")

RATE_LIMIT_SECRET = os.environ.get("CANIRUN_RATE_LIMIT_SECRET", "default-dev-secret")
RATE_LIMIT_MAX = 5
RATE_LIMIT_WINDOW_S = 24 * 60 * 60

HTTP_TIMEOUT_S = float(os.environ.get("CANIRUN_HTTP_TIMEOUT", "20"))

STEAM_APPDETAILS_URL = "https://store.steampowered.com/api/appdetails"
STEAM_SEARCH_URL = "https://store.steampowered.com/api/storesearch/"

GEEKBENCH_CPU_URL = "https://browser.geekbench.com/processor-benchmarks.json"
GEEKBENCH_GPU_URL = "https://browser.geekbench.com/gpu-benchmarks.json"
