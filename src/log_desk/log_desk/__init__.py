"""Log Desk package.

Personal work-hours tracker: validated persistence of daily login/logout
records with a corruption-detecting checksum, organized by feature modules
(timelogs, integrity, storage) behind a thin Flask controller layer.
"""
