# Curated hardware/OS catalogs and heuristic lookup tables.
#
# Scores are relative (0-100) and only comparable inside one namespace.
# Within a product line entries are listed in ascending score order: when a
# requirement phrase ties between several candidates the fuzzy matcher keeps
# the first one, i.e. the weakest, which is the right bar for a requirement.

CPU_SCORES = {
    # Intel Core 2
    "Intel Core 2 Duo E8400": 3,
    "Intel Core 2 Quad Q6600": 5,
    # Intel 2nd / 3rd gen
    "Intel Core i3-2100": 6,
    "Intel Core i5-2400": 9,
    "Intel Core i5-2500K": 10,
    "Intel Core i7-2600K": 13,
    "Intel Core i3-3220": 7,
    "Intel Core i5-3470": 11,
    "Intel Core i5-3570K": 12,
    "Intel Core i7-3770": 15,
    "Intel Core i7-3770K": 16,
    # Intel 4th gen
    "Intel Core i3-4130": 8,
    "Intel Core i5-4460": 12,
    "Intel Core i5-4590": 13,
    "Intel Core i5-4690K": 14,
    "Intel Core i7-4770": 17,
    "Intel Core i7-4790": 18,
    "Intel Core i7-4790K": 19,
    # Intel 6th / 7th gen
    "Intel Core i3-6100": 10,
    "Intel Core i5-6400": 14,
    "Intel Core i5-6500": 15,
    "Intel Core i5-6600K": 17,
    "Intel Core i7-6700": 20,
    "Intel Core i7-6700K": 22,
    "Intel Core i3-7100": 11,
    "Intel Core i5-7400": 15,
    "Intel Core i5-7500": 16,
    "Intel Core i5-7600K": 18,
    "Intel Core i7-7700": 21,
    "Intel Core i7-7700K": 23,
    # Intel 8th / 9th gen
    "Intel Core i3-8100": 14,
    "Intel Core i5-8400": 22,
    "Intel Core i5-8600K": 25,
    "Intel Core i7-8700": 30,
    "Intel Core i7-8700K": 32,
    "Intel Core i3-9100F": 15,
    "Intel Core i5-9400F": 23,
    "Intel Core i5-9600K": 27,
    "Intel Core i7-9700K": 36,
    "Intel Core i9-9900K": 42,
    # Intel 10th / 11th gen
    "Intel Core i3-10100": 20,
    "Intel Core i5-10400": 30,
    "Intel Core i5-10600K": 35,
    "Intel Core i7-10700K": 45,
    "Intel Core i9-10900K": 52,
    "Intel Core i5-11400": 36,
    "Intel Core i5-11600K": 40,
    "Intel Core i7-11700K": 50,
    "Intel Core i9-11900K": 53,
    # Intel 12th-14th gen
    "Intel Core i3-12100": 30,
    "Intel Core i5-12400": 44,
    "Intel Core i5-12600K": 60,
    "Intel Core i7-12700K": 74,
    "Intel Core i9-12900K": 84,
    "Intel Core i5-13400": 55,
    "Intel Core i5-13600K": 75,
    "Intel Core i7-13700K": 88,
    "Intel Core i9-13900K": 98,
    "Intel Core i5-14400": 57,
    "Intel Core i5-14600K": 78,
    "Intel Core i7-14700K": 94,
    "Intel Core i9-14900K": 100,
    # Intel mobile
    "Intel Core i5-1135G7": 22,
    "Intel Core i7-1165G7": 24,
    "Intel Core i5-1235U": 30,
    "Intel Core i7-12700H": 58,
    "Intel Core i7-13700H": 64,
    # AMD FX / Athlon
    "AMD FX-4300": 6,
    "AMD FX-6300": 9,
    "AMD FX-8320": 12,
    "AMD FX-8350": 13,
    "AMD Athlon 200GE": 7,
    # AMD Ryzen 1000 / 2000
    "AMD Ryzen 3 1200": 12,
    "AMD Ryzen 5 1400": 15,
    "AMD Ryzen 5 1600": 21,
    "AMD Ryzen 7 1700": 25,
    "AMD Ryzen 7 1800X": 28,
    "AMD Ryzen 3 2200G": 13,
    "AMD Ryzen 5 2400G": 17,
    "AMD Ryzen 5 2600": 24,
    "AMD Ryzen 7 2700X": 31,
    # AMD Ryzen 3000 / 5000
    "AMD Ryzen 3 3100": 20,
    "AMD Ryzen 5 3600": 33,
    "AMD Ryzen 7 3700X": 42,
    "AMD Ryzen 9 3900X": 56,
    "AMD Ryzen 5 5500": 36,
    "AMD Ryzen 5 5600X": 42,
    "AMD Ryzen 7 5700X": 50,
    "AMD Ryzen 7 5800X3D": 52,
    "AMD Ryzen 7 5800X": 53,
    "AMD Ryzen 9 5900X": 68,
    "AMD Ryzen 9 5950X": 78,
    # AMD Ryzen 7000
    "AMD Ryzen 5 7600X": 54,
    "AMD Ryzen 7 7800X3D": 65,
    "AMD Ryzen 7 7700X": 68,
    "AMD Ryzen 9 7900X": 86,
    "AMD Ryzen 9 7950X": 99,
    # Apple silicon
    "Apple M1": 40,
    "Apple M2": 44,
    "Apple M1 Pro": 50,
    "Apple M3": 50,
    "Apple M2 Pro": 58,
    "Apple M3 Pro": 60,
}

GPU_SCORES = {
    # Integrated
    "Intel HD Graphics 4000": 2,
    "Intel HD Graphics 530": 3,
    "Intel HD Graphics 620": 3,
    "Intel UHD Graphics 620": 4,
    "Intel UHD Graphics 630": 4,
    "AMD Radeon Vega 8 Graphics": 6,
    "AMD Radeon Vega 10 Graphics": 6,
    "AMD Radeon Vega 11 Graphics": 7,
    "Intel Iris Xe Graphics": 8,
    "AMD Radeon 680M": 14,
    "AMD Radeon 780M": 17,
    # NVIDIA legacy
    "NVIDIA GeForce GT 730": 3,
    "NVIDIA GeForce GT 1030": 6,
    "NVIDIA GeForce GTX 460": 5,
    "NVIDIA GeForce GTX 560": 7,
    "NVIDIA GeForce GTX 660": 10,
    "NVIDIA GeForce GTX 670": 12,
    "NVIDIA GeForce GTX 680": 13,
    "NVIDIA GeForce GTX 750": 9,
    "NVIDIA GeForce GTX 750 Ti": 10,
    "NVIDIA GeForce GTX 760": 12,
    "NVIDIA GeForce GTX 770": 15,
    "NVIDIA GeForce GTX 780": 17,
    "NVIDIA GeForce GTX 950": 13,
    "NVIDIA GeForce GTX 960": 15,
    "NVIDIA GeForce GTX 970": 22,
    "NVIDIA GeForce GTX 980": 25,
    "NVIDIA GeForce GTX 980 Ti": 31,
    # NVIDIA GTX 10 / 16
    "NVIDIA GeForce GTX 1050": 15,
    "NVIDIA GeForce GTX 1050 Ti": 18,
    "NVIDIA GeForce GTX 1060 3GB": 26,
    "NVIDIA GeForce GTX 1060 6GB": 28,
    "NVIDIA GeForce GTX 1070": 36,
    "NVIDIA GeForce GTX 1070 Ti": 40,
    "NVIDIA GeForce GTX 1080": 44,
    "NVIDIA GeForce GTX 1080 Ti": 55,
    "NVIDIA GeForce GTX 1630": 13,
    "NVIDIA GeForce GTX 1650": 22,
    "NVIDIA GeForce GTX 1650 Super": 28,
    "NVIDIA GeForce GTX 1660": 31,
    "NVIDIA GeForce GTX 1660 Super": 34,
    "NVIDIA GeForce GTX 1660 Ti": 35,
    # NVIDIA RTX 20
    "NVIDIA GeForce RTX 2060": 40,
    "NVIDIA GeForce RTX 2060 Super": 46,
    "NVIDIA GeForce RTX 2070": 48,
    "NVIDIA GeForce RTX 2070 Super": 52,
    "NVIDIA GeForce RTX 2080": 56,
    "NVIDIA GeForce RTX 2080 Super": 58,
    "NVIDIA GeForce RTX 2080 Ti": 64,
    # NVIDIA RTX 30
    "NVIDIA GeForce RTX 3050": 35,
    "NVIDIA GeForce RTX 3060": 46,
    "NVIDIA GeForce RTX 3060 Ti": 55,
    "NVIDIA GeForce RTX 3070": 61,
    "NVIDIA GeForce RTX 3070 Ti": 64,
    "NVIDIA GeForce RTX 3080": 72,
    "NVIDIA GeForce RTX 3080 Ti": 76,
    "NVIDIA GeForce RTX 3090": 78,
    "NVIDIA GeForce RTX 3090 Ti": 82,
    # NVIDIA RTX 40
    "NVIDIA GeForce RTX 4060": 53,
    "NVIDIA GeForce RTX 4060 Ti": 60,
    "NVIDIA GeForce RTX 4070": 70,
    "NVIDIA GeForce RTX 4070 Super": 76,
    "NVIDIA GeForce RTX 4070 Ti": 78,
    "NVIDIA GeForce RTX 4070 Ti Super": 82,
    "NVIDIA GeForce RTX 4080": 88,
    "NVIDIA GeForce RTX 4080 Super": 90,
    "NVIDIA GeForce RTX 4090": 100,
    # AMD legacy
    "AMD Radeon HD 5770": 5,
    "AMD Radeon HD 6870": 8,
    "AMD Radeon HD 7770": 8,
    "AMD Radeon HD 7850": 11,
    "AMD Radeon HD 7870": 13,
    "AMD Radeon HD 7970": 18,
    "AMD Radeon R7 260X": 9,
    "AMD Radeon R7 370": 12,
    "AMD Radeon R9 270X": 14,
    "AMD Radeon R9 280X": 19,
    "AMD Radeon R9 290": 24,
    "AMD Radeon R9 390": 26,
    # AMD Polaris / Vega
    "AMD Radeon RX 460": 10,
    "AMD Radeon RX 470": 20,
    "AMD Radeon RX 480": 23,
    "AMD Radeon RX 550": 8,
    "AMD Radeon RX 560": 11,
    "AMD Radeon RX 570": 21,
    "AMD Radeon RX 580": 24,
    "AMD Radeon RX 590": 27,
    "AMD Radeon RX Vega 56": 38,
    "AMD Radeon RX Vega 64": 42,
    # AMD RDNA
    "AMD Radeon RX 5500 XT": 27,
    "AMD Radeon RX 5600 XT": 39,
    "AMD Radeon RX 5700": 44,
    "AMD Radeon RX 5700 XT": 48,
    "AMD Radeon RX 6500 XT": 22,
    "AMD Radeon RX 6600": 42,
    "AMD Radeon RX 6600 XT": 47,
    "AMD Radeon RX 6650 XT": 49,
    "AMD Radeon RX 6700 XT": 56,
    "AMD Radeon RX 6750 XT": 59,
    "AMD Radeon RX 6800": 66,
    "AMD Radeon RX 6800 XT": 73,
    "AMD Radeon RX 6900 XT": 77,
    "AMD Radeon RX 6950 XT": 80,
    "AMD Radeon RX 7600": 50,
    "AMD Radeon RX 7600 XT": 53,
    "AMD Radeon RX 7700 XT": 64,
    "AMD Radeon RX 7800 XT": 72,
    "AMD Radeon RX 7900 GRE": 76,
    "AMD Radeon RX 7900 XT": 86,
    "AMD Radeon RX 7900 XTX": 94,
    # Intel Arc
    "Intel Arc A380": 20,
    "Intel Arc A750": 45,
    "Intel Arc A770": 50,
    # Apple silicon
    "Apple M1": 16,
    "Apple M2": 20,
    "Apple M3": 24,
    "Apple M1 Pro": 28,
    "Apple M2 Pro": 33,
    "Apple M3 Pro": 36,
    "Apple M1 Max": 45,
    "Apple M2 Max": 52,
    "Apple M3 Max": 60,
}

OS_SCORES = {
    "Windows XP": 5,
    "Windows Vista": 8,
    "Windows 7": 15,
    "Windows 8": 20,
    "Windows 8.1": 22,
    "Windows 10": 40,
    "Windows 11": 50,
    "macOS Sierra": 10,
    "macOS High Sierra": 12,
    "macOS Mojave": 14,
    "macOS Catalina": 16,
    "macOS Big Sur": 20,
    "macOS Monterey": 24,
    "macOS Ventura": 28,
    "macOS Sonoma": 32,
    "macOS Sequoia": 36,
    "macOS Tahoe": 40,
    "Ubuntu 16.04": 10,
    "Ubuntu 18.04": 14,
    "Ubuntu 20.04": 18,
    "Ubuntu 22.04": 22,
    "Ubuntu 24.04": 26,
    "Debian 10": 14,
    "Debian 11": 18,
    "Debian 12": 22,
    "Fedora 38": 22,
    "Fedora 40": 26,
    "Linux Mint 20": 18,
    "Linux Mint 21": 22,
    "SteamOS 3": 24,
    "Arch Linux": 30,
}

# OS catalog entry -> (platform family, product line). Version ordering is
# only meaningful between two entries of the same product line.
OS_LINES = {
    "Windows XP": ("windows", "windows"),
    "Windows Vista": ("windows", "windows"),
    "Windows 7": ("windows", "windows"),
    "Windows 8": ("windows", "windows"),
    "Windows 8.1": ("windows", "windows"),
    "Windows 10": ("windows", "windows"),
    "Windows 11": ("windows", "windows"),
    "macOS Sierra": ("macos", "macos"),
    "macOS High Sierra": ("macos", "macos"),
    "macOS Mojave": ("macos", "macos"),
    "macOS Catalina": ("macos", "macos"),
    "macOS Big Sur": ("macos", "macos"),
    "macOS Monterey": ("macos", "macos"),
    "macOS Ventura": ("macos", "macos"),
    "macOS Sonoma": ("macos", "macos"),
    "macOS Sequoia": ("macos", "macos"),
    "macOS Tahoe": ("macos", "macos"),
    "Ubuntu 16.04": ("linux", "ubuntu"),
    "Ubuntu 18.04": ("linux", "ubuntu"),
    "Ubuntu 20.04": ("linux", "ubuntu"),
    "Ubuntu 22.04": ("linux", "ubuntu"),
    "Ubuntu 24.04": ("linux", "ubuntu"),
    "Debian 10": ("linux", "debian"),
    "Debian 11": ("linux", "debian"),
    "Debian 12": ("linux", "debian"),
    "Fedora 38": ("linux", "fedora"),
    "Fedora 40": ("linux", "fedora"),
    "Linux Mint 20": ("linux", "mint"),
    "Linux Mint 21": ("linux", "mint"),
    "SteamOS 3": ("linux", "steamos"),
    "Arch Linux": ("linux", "arch"),
}

# macOS marketing version -> codename; lets "macOS 14.2" resolve like "Sonoma".
MACOS_VERSION_NAMES = {
    "10.12": "Sierra",
    "10.13": "High Sierra",
    "10.14": "Mojave",
    "10.15": "Catalina",
    "11": "Big Sur",
    "12": "Monterey",
    "13": "Ventura",
    "14": "Sonoma",
    "15": "Sequoia",
    "26": "Tahoe",
}

MACOS_CODENAMES = (
    "yosemite", "el capitan", "sierra", "high sierra", "mojave", "catalina",
    "big sur", "monterey", "ventura", "sonoma", "sequoia", "tahoe",
)

PLATFORM_KEYWORDS = {
    "windows": (r"\bwindows\b", r"\bwin\s?(?:xp|vista|7|8|8\.1|10|11)\b", r"\bwin(?:32|64)\b"),
    "macos": (r"\bmac\s?os\b", r"\bos\s?x\b", r"\bmacos\b", r"\bmac\b", r"\bdarwin\b"),
    "linux": (
        r"\blinux\b", r"\bubuntu\b", r"\bdebian\b", r"\bfedora\b", r"\bsteam\s?os\b",
        r"\bmint\b", r"\barch\b", r"\bmanjaro\b", r"\bpop!?_?os\b", r"\bcentos\b",
        r"\bopensuse\b", r"\bgentoo\b", r"\bkubuntu\b", r"\belementary\b",
    ),
}

# Unbranded silicon codenames (lspci without a bracketed product name) ->
# a representative catalog product. The weaker SKU is used where a die
# shipped in several products.
GPU_CODENAMES = (
    (r"\bad102\b", "NVIDIA GeForce RTX 4090"),
    (r"\bad103\b", "NVIDIA GeForce RTX 4080"),
    (r"\bad104\b", "NVIDIA GeForce RTX 4070"),
    (r"\bad106\b", "NVIDIA GeForce RTX 4060 Ti"),
    (r"\bad107\b", "NVIDIA GeForce RTX 4060"),
    (r"\bga102\b", "NVIDIA GeForce RTX 3080"),
    (r"\bga104\b", "NVIDIA GeForce RTX 3070"),
    (r"\bga106\b", "NVIDIA GeForce RTX 3060"),
    (r"\bga107\b", "NVIDIA GeForce RTX 3050"),
    (r"\btu102\b", "NVIDIA GeForce RTX 2080 Ti"),
    (r"\btu104\b", "NVIDIA GeForce RTX 2080"),
    (r"\btu106\b", "NVIDIA GeForce RTX 2060"),
    (r"\btu116\b", "NVIDIA GeForce GTX 1660"),
    (r"\btu117\b", "NVIDIA GeForce GTX 1650"),
    (r"\bgp102\b", "NVIDIA GeForce GTX 1080 Ti"),
    (r"\bgp104\b", "NVIDIA GeForce GTX 1070"),
    (r"\bgp106\b", "NVIDIA GeForce GTX 1060 3GB"),
    (r"\bgp107\b", "NVIDIA GeForce GTX 1050"),
    (r"\bgp108\b", "NVIDIA GeForce GT 1030"),
    (r"\bgm204\b", "NVIDIA GeForce GTX 970"),
    (r"\bgm206\b", "NVIDIA GeForce GTX 950"),
    (r"\bgm107\b", "NVIDIA GeForce GTX 750"),
    (r"\bnavi\s?31\b", "AMD Radeon RX 7900 XT"),
    (r"\bnavi\s?32\b", "AMD Radeon RX 7700 XT"),
    (r"\bnavi\s?33\b", "AMD Radeon RX 7600"),
    (r"\bnavi\s?21\b", "AMD Radeon RX 6800"),
    (r"\bnavi\s?22\b", "AMD Radeon RX 6700 XT"),
    (r"\bnavi\s?23\b", "AMD Radeon RX 6600"),
    (r"\bnavi\s?24\b", "AMD Radeon RX 6500 XT"),
    (r"\bnavi\s?10\b", "AMD Radeon RX 5700"),
    (r"\bnavi\s?14\b", "AMD Radeon RX 5500 XT"),
    (r"\bvega\s?10\b(?!\s*(?:mobile\s*)?graphics)", "AMD Radeon RX Vega 56"),
    (r"\b(?:ellesmere|polaris\s?20)\b", "AMD Radeon RX 570"),
    (r"\bpolaris\s?10\b", "AMD Radeon RX 470"),
    (r"\b(?:baffin|polaris\s?11)\b", "AMD Radeon RX 460"),
    (r"\b(?:lexa|polaris\s?12)\b", "AMD Radeon RX 550"),
    (r"\brembrandt\b", "AMD Radeon 680M"),
    (r"\bphoenix\b", "AMD Radeon 780M"),
)

# CPU family asks without a model number ("Intel i5", "Ryzen 7").
# (family, pattern in requirement text, pattern selecting catalog members)
CPU_FAMILIES = (
    ("Intel Core i3", r"\b(?:core\s*)?i3\b", r"\bi3-"),
    ("Intel Core i5", r"\b(?:core\s*)?i5\b", r"\bi5-"),
    ("Intel Core i7", r"\b(?:core\s*)?i7\b", r"\bi7-"),
    ("Intel Core i9", r"\b(?:core\s*)?i9\b", r"\bi9-"),
    ("AMD Ryzen 3", r"\bryzen\s*3\b", r"\bRyzen 3 "),
    ("AMD Ryzen 5", r"\bryzen\s*5\b", r"\bRyzen 5 "),
    ("AMD Ryzen 7", r"\bryzen\s*7\b", r"\bRyzen 7 "),
    ("AMD Ryzen 9", r"\bryzen\s*9\b", r"\bRyzen 9 "),
    ("AMD FX", r"\bfx\b", r"\bFX-"),
    ("Intel Core 2 Duo", r"\bcore\s*2\s*duo\b", r"\bCore 2 Duo\b"),
    ("Intel Core 2 Quad", r"\bcore\s*2\s*quad\b", r"\bCore 2 Quad\b"),
)
