"""Default configuration values for bootloader."""

DEFAULT_CONFIG_FILE = "bbl.yml"

DEFAULT_CONFIG: dict[str, str | bool] = {
    "state_dir": ".",
    "terraform_binary": "terraform",
    "aws_region": "",
    "debug": False,
}
