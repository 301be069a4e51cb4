"""vboxctl - short commands for VirtualBox virtual machines."""

__version__ = "0.1.0"
