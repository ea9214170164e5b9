from .renderer import MatplotlibRenderer, RendererConfig, plot_curves

__all__ = ["MatplotlibRenderer", "RendererConfig", "plot_curves"]
