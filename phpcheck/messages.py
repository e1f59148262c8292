"""
phpcheck Messages — Localized alert text.

Keys follow the `startup.errors.<check>.title` / `.desc` scheme. Only
English ships; an unknown key is returned as-is so a missing string is
visible instead of fatal.
"""

MESSAGES: dict[str, str] = {
    "startup.errors.php_binary.title":
        "PHP is not correctly installed",
    "startup.errors.php_binary.desc":
        "You must install PHP via brew. Try running `which php` in Terminal, "
        "it should return the php binary inside the Homebrew bin directory. "
        "The app will not work correctly until you resolve this issue.",
    "startup.errors.php_opt.title":
        "PHP is not correctly installed",
    "startup.errors.php_opt.desc":
        "PHP binaries could not be found in the Homebrew opt directory. "
        "The app will not work correctly until you resolve this issue.",
    "startup.errors.valet_executable.title":
        "Laravel Valet is not correctly installed",
    "startup.errors.valet_executable.desc":
        "You must install Valet with composer. Try running `which valet` in "
        "Terminal, it should return /usr/local/bin/valet or "
        "/opt/homebrew/bin/valet. The app will not work correctly until you "
        "resolve this issue.",
    "startup.errors.sudoers_brew.title":
        "Brew has not been added to sudoers.d",
    "startup.errors.sudoers_brew.desc":
        "You must run `sudo valet trust` to ensure Valet can switch PHP "
        "versions without asking for your password. "
        "The app will not work correctly until you resolve this issue.",
    "startup.errors.sudoers_valet.title":
        "Valet has not been added to sudoers.d",
    "startup.errors.sudoers_valet.desc":
        "You must run `sudo valet trust` to ensure Valet can run without "
        "asking for your password. "
        "The app will not work correctly until you resolve this issue.",
    "startup.errors.services.title":
        "Multiple PHP services are active",
    "startup.errors.services.desc":
        "More than one PHP service is running. This can cause unexpected "
        "behaviour. Stop the extra services with `brew services stop`, "
        "leaving only the version you want to use.",
}


def localized(key: str) -> str:
    """Look up the English text for a message key."""
    return MESSAGES.get(key, key)
