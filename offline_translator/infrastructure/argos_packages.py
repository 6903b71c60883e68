# offline_translator/infrastructure/argos_packages.py
"""
Helpers to install Argos Translate language packages.

A missing package is the usual reason a translation fails, so these are what
install_models.py offers to the user.
"""
import logging
import os
from typing import Iterable, List, Optional, Tuple

import argostranslate.package

logger = logging.getLogger(__name__)

LanguagePair = Tuple[str, str]

# Argos translates between two non-English languages through English.
PIVOT_CODE = "en"


def installed_pairs() -> List[LanguagePair]:
    """(from_code, to_code) of every installed package."""
    packages = argostranslate.package.get_installed_packages()
    return [(pkg.from_code, pkg.to_code) for pkg in packages]


def update_index():
    """Refreshes the remote package index. Needs network access."""
    logger.info("Infrastructure Layer (ArgosPackages): Updating remote package index...")
    argostranslate.package.update_package_index()


def available_packages(codes: Optional[Iterable[str]] = None) -> list:
    """
    Packages that can be downloaded, optionally limited to pairs where both
    languages are in codes.
    """
    packages = argostranslate.package.get_available_packages()
    if codes is None:
        return list(packages)
    wanted = set(codes)
    return [pkg for pkg in packages if pkg.from_code in wanted and pkg.to_code in wanted]


def find_package(from_code: str, to_code: str, packages: Optional[list] = None):
    """Available package for a pair, or None."""
    if packages is None:
        packages = available_packages()
    return next((pkg for pkg in packages if pkg.from_code == from_code and pkg.to_code == to_code), None)


def install_package(pkg) -> LanguagePair:
    """Downloads and installs one available package, then removes the download."""
    logger.info("Infrastructure Layer (ArgosPackages): Downloading %s -> %s", pkg.from_code, pkg.to_code)
    download_path = pkg.download()
    try:
        argostranslate.package.install_from_path(download_path)
        logger.info("Infrastructure Layer (ArgosPackages): Installed %s -> %s", pkg.from_code, pkg.to_code)
    finally:
        if download_path and os.path.exists(download_path):
            try:
                os.remove(download_path)
            except OSError as e:
                logger.warning("Infrastructure Layer (ArgosPackages): Could not remove %s: %s", download_path, e)
    return pkg.from_code, pkg.to_code


def install_pair(from_code: str, to_code: str, packages: Optional[list] = None) -> List[LanguagePair]:
    """
    Installs what is needed to translate from_code -> to_code.

    Uses the direct package when one exists. Otherwise installs
    from_code -> en and en -> to_code, skipping the ones already installed.

    Returns:
        The pairs that were installed (empty when everything was already there).

    Raises:
        LookupError: neither a direct package nor both pivot packages exist.
    """
    if packages is None:
        packages = available_packages()

    pkg = find_package(from_code, to_code, packages)
    if pkg is not None:
        return [install_package(pkg)]

    if PIVOT_CODE in (from_code, to_code):
        raise LookupError(f"No language package available for {from_code} -> {to_code}")

    legs = [(from_code, PIVOT_CODE), (PIVOT_CODE, to_code)]
    leg_packages = [find_package(a, b, packages) for a, b in legs]
    missing = [f"{a} -> {b}" for (a, b), leg in zip(legs, leg_packages) if leg is None]
    if missing:
        raise LookupError(f"No language package available for {from_code} -> {to_code} "
                          f"(missing {', '.join(missing)})")

    logger.info("Infrastructure Layer (ArgosPackages): No direct %s -> %s package, installing through '%s'",
                from_code, to_code, PIVOT_CODE)
    installed = set(installed_pairs())
    return [install_package(leg) for leg in leg_packages
            if (leg.from_code, leg.to_code) not in installed]


def missing_packages(codes: Iterable[str]) -> list:
    """Available packages between the given languages that are not installed yet."""
    installed = set(installed_pairs())
    return [pkg for pkg in available_packages(codes) if (pkg.from_code, pkg.to_code) not in installed]
