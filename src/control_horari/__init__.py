"""Control Horari package.

Time tracking for construction-sector crews, organized by feature modules
(entries, shifts, geofence, vacations, reports, ...) with a thin Flask
controller layer over service/repository layers.
"""
