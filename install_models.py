# install_models.py
"""
Interactive installer for the Argos Translate language packages used by the
translator. Only pairs between catalog languages are offered.
"""
import logging
import sys

from offline_translator.config import get_settings
from offline_translator.domain.language_catalog import LanguageCatalog
from offline_translator.infrastructure import argos_packages
from offline_translator.logging_config import setup_logging

logger = logging.getLogger("install_models")


def show_installed(catalog: LanguageCatalog):
    pairs = argos_packages.installed_pairs()
    if not pairs:
        print("No language packages installed.")
        return
    print(f"Installed language packages: {len(pairs)}")
    for from_code, to_code in sorted(pairs):
        print(f"  {catalog.display_name(from_code)} ({from_code}) -> {catalog.display_name(to_code)} ({to_code})")


def install_all_missing(catalog: LanguageCatalog):
    packages = argos_packages.missing_packages(catalog.codes)
    if not packages:
        print("Every available package between the supported languages is already installed.")
        return
    for pkg in packages:
        try:
            argos_packages.install_package(pkg)
            print(f"Installed {pkg.from_code} -> {pkg.to_code}")
        except Exception as e:
            logger.error("Could not install %s -> %s: %s", pkg.from_code, pkg.to_code, e)


def install_one(catalog: LanguageCatalog):
    packages = argos_packages.missing_packages(catalog.codes)
    if not packages:
        print("Nothing left to install.")
        return
    for i, pkg in enumerate(packages):
        print(f"{i + 1}. {catalog.display_name(pkg.from_code)} -> {catalog.display_name(pkg.to_code)}")
    selection = input("Number of the package to install: ").strip()
    if selection.isdigit() and 1 <= int(selection) <= len(packages):
        pkg = packages[int(selection) - 1]
        try:
            argos_packages.install_package(pkg)
            print(f"Installed {pkg.from_code} -> {pkg.to_code}")
        except Exception as e:
            logger.error("Could not install %s -> %s: %s", pkg.from_code, pkg.to_code, e)
    else:
        print("Invalid option.")


def menu():
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    catalog = LanguageCatalog()

    try:
        argos_packages.update_index()
    except Exception as e:
        logger.warning("Could not update the package index (offline?): %s", e)

    while True:
        print("\n=== Offline Translator language packages ===")
        print("1. Show installed packages")
        print("2. Install every missing package for the supported languages")
        print("3. Install one package")
        print("q. Quit")

        option = input("Choose an option: ").strip().lower()

        if option == "1":
            show_installed(catalog)
        elif option == "2":
            install_all_missing(catalog)
        elif option == "3":
            install_one(catalog)
        elif option == "q":
            break
        else:
            print("Unknown option.")


def install_from_args(catalog: LanguageCatalog, source: str, target: str) -> int:
    """Non-interactive mode: `install_models.py English id` installs that pair."""
    try:
        from_code = catalog.resolve(source).code
        to_code = catalog.resolve(target).code
        argos_packages.update_index()
        installed = argos_packages.install_pair(from_code, to_code)
    except Exception as e:
        logger.error("%s", e)
        return 1
    if not installed:
        print(f"{from_code} -> {to_code} is already installed.")
    for pair in installed:
        print(f"Installed {pair[0]} -> {pair[1]}")
    return 0


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) == 2:
        settings = get_settings()
        setup_logging(settings.log_level, settings.log_file)
        return install_from_args(LanguageCatalog(), args[0], args[1])

    try:
        menu()
    except (KeyboardInterrupt, EOFError):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
