import os
import numpy as np

def save_point_clouds(clouds: dict[str, np.ndarray], output_path: str, **metadata) -> None:
    """
    Write sampled clouds to a compressed .npz archive.

    Each "n,l,m" key stores its flat float32 buffer as an (N, 3) array.
    Scalar metadata (Z, seed, ...) is stored under "meta_<name>".
    """
    if os.path.exists(output_path):
        os.remove(output_path)

    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    arrays = {key: np.asarray(coords, dtype=np.float32).reshape(-1, 3) for key, coords in clouds.items()}
    for name, value in metadata.items():
        if value is None:
            continue
        arrays[f"meta_{name}"] = np.asarray(value)

    np.savez_compressed(output_path, **arrays)

def load_point_clouds(input_path: str) -> tuple[dict[str, np.ndarray], dict[str, np.ndarray]]:
    """
    Read an archive written by save_point_clouds.

    Returns:
        (clouds, metadata) with clouds mapping "n,l,m" -> flat buffer
    """
    clouds = {}
    metadata = {}
    with np.load(input_path) as data:
        for key in data.files:
            if key.startswith("meta_"):
                metadata[key[len("meta_"):]] = data[key]
            else:
                clouds[key] = data[key].reshape(-1)
    return clouds, metadata
