import matplotlib

# Headless backend for the visualization tests
matplotlib.use("Agg")
