from prefect import task
import yaml
from orbital_cloud.utils import ErrorHandler, ErrorLevel, ErrorCode
from orbital_cloud.helpers.constant import element_symbols, atomic_number

z_modes = ("atomic_number", "slater", "fixed")

class Settings:
    def __init__(self, setting_path: str | None = None):
        self.setting_path = setting_path
        self.error_handler = ErrorHandler()
        if setting_path is not None:
            self.import_settings()

    atom_name: str = "H"
    electron_count: int | None = None # defaults to the atomic number (neutral atom)
    z_mode: str = "atomic_number"
    z_value: float = 1.0 # used when z_mode is "fixed"
    points_per_electron: int | None = None # 3000, or 1500 above 30 electrons
    attempts_per_point: int = 100
    presample_count: int = 5000
    ceiling_margin: float = 1.5
    seed: int | None = None
    output_path: str = "data/output/orbital_cloud.npz"

    @property
    def atomic_number(self) -> int:
        return atomic_number(self.atom_name)

    @property
    def total_electrons(self) -> int:
        if self.electron_count is None:
            return self.atomic_number
        return self.electron_count

    @property
    def resolved_points_per_electron(self) -> int:
        if self.points_per_electron is not None:
            return self.points_per_electron
        return 1500 if self.total_electrons > 30 else 3000

    def _positive_int(self, settings: dict, key: str, upper: int | None = None) -> None:
        value = settings[key]
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            self.error_handler.handle(
                f"{key} must be a positive integer. The default value ({getattr(self, key)}) is used.",
                ErrorCode.VALIDATION,
                ErrorLevel.WARNING,
                {key: value}
            )
            return
        setattr(self, key, value)
        if upper is not None and value > upper:
            self.error_handler.handle(
                f"{key}={value} is very large. Sampling may take a long time.",
                ErrorCode.VALIDATION,
                ErrorLevel.WARNING,
                {key: value}
            )

    def import_settings(self) -> None:
        try:
            with open(self.setting_path, 'r') as f:
                settings = yaml.safe_load(f)

            if settings is None:
                settings = {}

        except FileNotFoundError:
            self.error_handler.handle(
                f"Settings file '{self.setting_path}' not found. Using default values.",
                ErrorCode.NOT_FOUND,
                ErrorLevel.ERROR,
                {"file_path": self.setting_path}
            )
            settings = {}
        except yaml.YAMLError:
            self.error_handler.handle(
                f"Invalid YAML format in settings file '{self.setting_path}'. Using default values.",
                ErrorCode.VALIDATION,
                ErrorLevel.ERROR,
                {"file_path": self.setting_path}
            )
            settings = {}

        if "atom_name" not in settings:
            self.error_handler.handle(
                "There is no atom_name in settings. Therefore, the default value (H) is used.",
                ErrorCode.NOT_FOUND,
                ErrorLevel.WARNING,
                {"available_fields": list(settings.keys())}
            )
        elif settings["atom_name"] not in element_symbols:
            error = self.error_handler.handle(
                f"Unknown element symbol: {settings['atom_name']}",
                ErrorCode.VALIDATION,
                ErrorLevel.CRITICAL,
                {"atom_name": settings["atom_name"]}
            )
            if error:
                raise error
        else:
            self.atom_name = settings["atom_name"]

        if "electron_count" in settings:
            self._positive_int(settings, "electron_count")
            if self.electron_count is not None and self.electron_count > 118:
                self.error_handler.handle(
                    "electron_count is larger than the Aufbau table holds (118). Extra electrons are ignored.",
                    ErrorCode.VALIDATION,
                    ErrorLevel.WARNING,
                    {"electron_count": self.electron_count}
                )

        if "z_mode" in settings:
            if settings["z_mode"] not in z_modes:
                self.error_handler.handle(
                    f"z_mode must be one of {z_modes}. The default value (atomic_number) is used.",
                    ErrorCode.VALIDATION,
                    ErrorLevel.WARNING,
                    {"z_mode": settings["z_mode"]}
                )
            else:
                self.z_mode = settings["z_mode"]

        if "z_value" in settings:
            try:
                z_value = float(settings["z_value"])
            except (TypeError, ValueError):
                z_value = -1.0
            if z_value <= 0:
                self.error_handler.handle(
                    "z_value must be a positive number. The default value (1.0) is used.",
                    ErrorCode.VALIDATION,
                    ErrorLevel.WARNING,
                    {"z_value": settings["z_value"]}
                )
            else:
                self.z_value = z_value

        if "points_per_electron" in settings:
            self._positive_int(settings, "points_per_electron", upper=100000)

        if "attempts_per_point" in settings:
            self._positive_int(settings, "attempts_per_point")

        if "presample_count" in settings:
            self._positive_int(settings, "presample_count")

        if "ceiling_margin" in settings:
            margin = settings["ceiling_margin"]
            if not isinstance(margin, (int, float)) or margin < 1.0:
                self.error_handler.handle(
                    "ceiling_margin must be at least 1.0. The default value (1.5) is used.",
                    ErrorCode.VALIDATION,
                    ErrorLevel.WARNING,
                    {"ceiling_margin": margin}
                )
            else:
                self.ceiling_margin = float(margin)

        if "seed" in settings:
            self.seed = settings["seed"]

        if "output_path" in settings:
            self.output_path = settings["output_path"]

@task(name="import settings")
def import_settings(setting_path: str) -> Settings:
    """
    load settings from yaml file
    """
    settings = Settings(setting_path)
    return settings
