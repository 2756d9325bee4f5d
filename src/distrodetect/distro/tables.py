"""Static lookup tables used by the detection pipeline."""

from types import MappingProxyType

# Distro and BSD names searched for in the release text when NAME= is absent.
# Order matters: the first entry found wins.
DISTRO_NAMES: tuple[str, ...] = (
    "Arch Linux", "Debian", "Ubuntu", "Void Linux", "FreeBSD", "NetBSD",
    "OpenBSD", "Manjaro", "Mint", "Elementary", "MX Linux", "Fedora",
    "openSUSE", "Solus", "Zorin", "CentOS", "KDE neon", "Lite", "Kali",
    "Antergos", "antiX", "Lubuntu", "PCLinuxOS", "Endless", "Peppermint",
    "SmartOS", "TrueOS", "Arco", "SparkyLinux", "deepin", "Puppy",
    "Slackware", "Bodhi", "Tails", "Xubuntu", "Archman", "Bluestar",
    "Mageia", "Deuvan", "Parrot", "Pop!", "ArchLabs", "Q4OS", "Kubuntu",
    "Nitrux", "Red Hat", "4MLinux", "Gentoo", "Pinguy", "LXLE", "KaOS",
    "Ultimate", "Alpine", "Feren", "KNOPPIX", "Robolinux", "Voyager",
    "Netrunner", "GhostBSD", "Budgie", "ClearOS", "Gecko", "SwagArch",
    "Emmabuntüs", "Scientific", "Omarine", "Neptune", "NixOS", "Slax",
    "Clonezilla", "DragonFly", "ExTiX", "Redcore", "Ubuntu Studio",
    "BunsenLabs", "BlackArch", "NuTyX", "ArchBang", "BackBox", "Sabayon",
    "AUSTRUMI", "Container", "ROSA", "SteamOS", "Tiny Core", "Kodachi",
    "Qubes", "siduction", "Parabola", "Trisquel", "Vector", "SolydXK",
    "Elive", "AV Linux", "Artix", "Raspbian", "Porteus",
)

# macOS version prefix -> codename
APPLE_CODENAMES: MappingProxyType[str, str] = MappingProxyType({
    "10.0": "Cheetah",
    "10.1": "Puma",
    "10.2": "Jaguar",
    "10.3": "Panther",
    "10.4": "Tiger",
    "10.5": "Leopard",
    "10.6": "Snow Leopard",
    "10.7": "Lion",
    "10.8": "Mountain Lion",
    "10.9": "Mavericks",
    "10.10": "Yosemite",
    "10.11": "El Capitan",
    "10.12": "Sierra",
    "10.13": "High Sierra",
    "10.14": "Mojave",
    "10.15": "Catalina",
})

# Short or technical names (as found in NAME= / DISTRIB_ID) -> display names
NAME_EXPANSIONS: MappingProxyType[str, str] = MappingProxyType({
    "ManjaroLinux": "Manjaro Linux",
    "arch": "Arch Linux",
    "archlinux": "Arch Linux",
    "void": "Void Linux",
    "alpine": "Alpine Linux",
    "debian": "Debian",
    "ubuntu": "Ubuntu",
    "fedora": "Fedora",
    "gentoo": "Gentoo",
    "nixos": "NixOS",
    "rhel": "Red Hat Enterprise Linux",
    "opensuse-leap": "openSUSE Leap",
    "opensuse-tumbleweed": "openSUSE Tumbleweed",
})


def expand_name(name: str) -> str:
    """Return the display name for a short distro name, or the name unchanged."""
    return NAME_EXPANSIONS.get(name, name)
