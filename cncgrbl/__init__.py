"""G-code parsing, motion planning and simulated stepper control for three-axis CNC machines."""

__version__ = "1.0.0"

__all__ = [
    "config",
    "gcode",
    "gcode_buffer",
    "gcode_exec",
    "hal_pins",
    "hal_stepper",
    "hal_timer",
    "planner",
    "serial_iface",
]