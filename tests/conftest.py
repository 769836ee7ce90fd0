import os

# plots are drawn without a display
os.environ.setdefault("MPLBACKEND", "Agg")
