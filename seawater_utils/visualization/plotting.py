from typing import Optional, Sequence, Union
import os
import numpy as np
import matplotlib.pyplot as plt

from matplotlib.figure import Figure

ArrayLike = Union[np.ndarray, Sequence[float], float]

def _ensure_outdir(outdir: Optional[str]) -> None:
    if outdir:
        os.makedirs(outdir, exist_ok=True)

def _maybe_save(fig: Figure, outdir: Optional[str], fname: Optional[str]) -> Optional[str]:
    if outdir and fname:
        path = os.path.join(outdir, fname)
        fig.savefig(path, dpi=150, bbox_inches="tight")
        return path
    return None

def plot_profile(
    p: ArrayLike,
    u: ArrayLike,
    *,
    title: str = "Internal energy profile",
    xlabel: str = "internal energy [J/kg]",
    ylabel: str = "sea pressure [dbar]",
    outdir: Optional[str] = None,
    filename: Optional[str] = None,
    show: bool = False,
) -> Optional[str]:
    """
    Plot a single cast u(p) with pressure increasing downwards.
    """
    _ensure_outdir(outdir)
    p = np.asarray(p, dtype=float).ravel()
    u = np.asarray(u, dtype=float).ravel()

    fig, ax = plt.subplots()
    ax.plot(u, p, lw=1.5, marker=".")
    ax.invert_yaxis()
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.set_title(title)
    ax.grid(True, ls=":", alpha=0.5)

    path = _maybe_save(fig, outdir, filename or "profile.png")
    if show:
        plt.show()
    else:
        plt.close(fig)
    return path

def plot_section(
    u: ArrayLike,
    *,
    title: str = "Internal energy [J/kg]",
    cmap: Optional[str] = None,
    colorbar: bool = True,
    outdir: Optional[str] = None,
    filename: Optional[str] = None,
    show: bool = False,
) -> Optional[str]:
    """
    Plot a 2D field u(row, col) as an image, first row at the top
    (rows are usually depth levels, columns casts).
    """
    _ensure_outdir(outdir)
    u = np.asarray(u, dtype=float)

    fig, ax = plt.subplots()
    im = ax.imshow(
        u,
        origin="upper",
        aspect="auto",
        cmap=cmap or "viridis",
        interpolation="nearest",
    )
    ax.set_title(title)
    ax.set_xlabel("column")
    ax.set_ylabel("row")
    if colorbar:
        fig.colorbar(im, ax=ax, shrink=0.9, pad=0.02)

    path = _maybe_save(fig, outdir, filename or "section.png")
    if show:
        plt.show()
    else:
        plt.close(fig)
    return path

def plot_internal_energy(u: np.ndarray, p: ArrayLike, *, outdir: Optional[str] = None,
                         show: bool = False) -> Optional[str]:
    """
    Profile plot for a single row/column result, section plot otherwise.
    The profile is drawn against p when p holds one value per point,
    against the sample index otherwise.
    """
    u = np.asarray(u, dtype=float)
    if min(u.shape) == 1:
        pp = np.asarray(p, dtype=float).ravel()
        if pp.size == u.size:
            return plot_profile(pp, u, outdir=outdir, filename="internal_energy.png", show=show)
        return plot_profile(np.arange(u.size), u, ylabel="sample", outdir=outdir,
                            filename="internal_energy.png", show=show)
    return plot_section(u, outdir=outdir, filename="internal_energy.png", show=show)
