"""Schools Application Layer."""
