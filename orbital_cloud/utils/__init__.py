from orbital_cloud.utils.error import (
    ErrorLevel,
    ErrorCode,
    ErrorHandler,
    CustomError,
    CriticalError,
    ValidationError,
    OrbitalWarning,
    QuantumNumberWarning,
    SamplingShortfallWarning,
    ConfigurationWarning,
)
