"""Backend factory for creating compute backends."""

from typing import Dict, List, Optional, Type
from nbody_sim.backends.base import Backend
from nbody_sim.backends.numpy_backend import NumPyBackend

_BACKENDS: Dict[str, Type[Backend]] = {
    "numpy": NumPyBackend,
}


def list_available_backends() -> List[str]:
    """List all available backends.
    
    Returns:
        List of backend names that can be instantiated
    """
    return list(_BACKENDS.keys())


def get_backend(name: Optional[str] = None) -> Backend:
    """Get a backend instance.
    
    Args:
        name: Backend name (e.g. 'numpy'). If None, the NumPy backend is used.
        
    Returns:
        Backend instance
        
    Raises:
        ValueError: If requested backend is not available
    """
    if name is None:
        return NumPyBackend()
    
    backend_class = _BACKENDS.get(name.lower())
    if backend_class is None:
        available = list_available_backends()
        raise ValueError(f"Unknown backend '{name}'. Available: {available}")
    return backend_class()
