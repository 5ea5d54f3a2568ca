from .dft import RealDFT, real_dft

__all__ = ["RealDFT", "real_dft"]
