import sys
import json
import logging
from pathlib import Path

# Add project root to Python path
sys.path.append(str(Path(__file__).parent.parent))

# Local Imports
from runningfix.geometry import BearingRay, find_intersection, haversine_distance_km, GeometryError
from runningfix.fix_finder import FixFinder
from runningfix.fix_finder.visualization import FixMapVisualizer

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

# --- Two bearings, one fix ---
ray1 = BearingRay.from_degrees(37.86203, -119.43397, 122.9)
ray2 = BearingRay.from_degrees(37.87366, -119.38145, 216.5)
print(ray1)
print(ray2)
print(f"Baseline: {haversine_distance_km(ray1, ray2):.3f} km")

try:
    print(f"Fix: {find_intersection(ray1, ray2)}")
except GeometryError as e:
    print(f"No fix: {type(e).__name__}: {e}")

# --- A whole file of bearings ---
data_path = Path(__file__).parent / "data" / "half_dome_bearings.csv"
response = FixFinder().run(str(data_path))
print(json.dumps(response["data"].get("summary", response["data"]), indent=2))

if response["success"]:
    out_path = Path(__file__).parent / "half_dome_fix.html"
    FixMapVisualizer().create_fix_map(response["data"]["report"]).save(str(out_path))
    print(f"Map saved to {out_path}")
