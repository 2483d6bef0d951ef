"""State I/O for saving and loading gravity engine snapshots."""

import numpy as np
import json
from typing import Tuple, Dict, Any, Optional
from pathlib import Path
from physics_sandbox.physics.gravity import Body
from physics_sandbox.physics.gravity_engine import GravityState


def save_state(
    state: GravityState,
    output_path: str,
    metadata: Optional[Dict[str, Any]] = None
):
    """Save a gravity snapshot to file.

    Args:
        state: Snapshot from ``GravityEngine.get_state()``
        output_path: Output file path (.npz or .json)
        metadata: Optional metadata dictionary
    """
    output_path = Path(output_path)

    if output_path.suffix == '.npz':
        bodies = state.bodies
        save_dict = {
            'ids': np.array([b.id for b in bodies], dtype=np.int64),
            'positions': np.array([[b.x, b.y] for b in bodies], dtype=np.float64).reshape(-1, 2),
            'velocities': np.array([[b.vx, b.vy] for b in bodies], dtype=np.float64).reshape(-1, 2),
            'masses': np.array([b.mass for b in bodies], dtype=np.float64),
            'width': state.width,
            'height': state.height,
        }
        if metadata:
            # Only scalars survive the npz round trip
            for key, value in metadata.items():
                if isinstance(value, (int, float, str)):
                    save_dict[f'metadata_{key}'] = value
        np.savez_compressed(output_path, **save_dict)

    elif output_path.suffix == '.json':
        state_dict = state.to_dict()
        state_dict['metadata'] = metadata or {}
        with open(output_path, 'w') as f:
            json.dump(state_dict, f, indent=2)

    else:
        raise ValueError(f"Unsupported file format: {output_path.suffix}. Use .npz or .json")


def load_state(input_path: str) -> Tuple[GravityState, Dict[str, Any]]:
    """Load a gravity snapshot from file.

    Args:
        input_path: Input file path

    Returns:
        Tuple of (state, metadata)
    """
    input_path = Path(input_path)

    if input_path.suffix == '.npz':
        with np.load(input_path) as data:
            ids = data['ids']
            positions = data['positions']
            velocities = data['velocities']
            masses = data['masses']
            bodies = tuple(
                Body(
                    id=int(ids[i]),
                    x=float(positions[i, 0]),
                    y=float(positions[i, 1]),
                    vx=float(velocities[i, 0]),
                    vy=float(velocities[i, 1]),
                    mass=float(masses[i]),
                )
                for i in range(len(ids))
            )
            state = GravityState(bodies=bodies, width=float(data['width']), height=float(data['height']))

            metadata = {}
            for key in data.keys():
                if key.startswith('metadata_'):
                    metadata[key[9:]] = data[key].item()

        return state, metadata

    elif input_path.suffix == '.json':
        with open(input_path, 'r') as f:
            state_dict = json.load(f)

        bodies = tuple(Body.from_dict(b) for b in state_dict['bodies'])
        state = GravityState(
            bodies=bodies,
            width=float(state_dict['width']),
            height=float(state_dict['height']),
        )
        return state, state_dict.get('metadata', {})

    else:
        raise ValueError(f"Unsupported file format: {input_path.suffix}. Use .npz or .json")
