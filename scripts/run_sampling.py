import argparse
import logging
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from orbital_cloud.flows.sampling_flow import sampling_pipeline

def main():
    """Entry point of the orbital point cloud pipeline"""
    parser = argparse.ArgumentParser(description='Sample hydrogen-like orbital point clouds for one atom')
    parser.add_argument('--config', default='config/settings.yaml', help='Path of the settings file')
    parser.add_argument('--output', default=None, help='Output .npz path (overrides output_path in settings)')
    parser.add_argument('--verbose', action='store_true', help='Log debug messages')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    clouds = sampling_pipeline(
        config_path=args.config,
        output_path=args.output,
    )

    print(f"Sampled {len(clouds)} orbitals:")
    for key, coords in clouds.items():
        print(f"  {key}: {len(coords) // 3} points")

if __name__ == "__main__":
    main()
