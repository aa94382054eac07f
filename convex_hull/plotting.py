import matplotlib.pyplot as plt
import numpy as np

from convex_hull.point_sequence import PointSequence


class FigureParams:
    def __init__(self, label=None, title=None, xlabel=None, ylabel=None):
        # Figure labels
        self.label = label
        self.title = title
        self.xlabel = xlabel
        self.ylabel = ylabel


def closed_boundary(hull: PointSequence) -> np.array:
    """ Hull coordinates with the first point repeated at the end """
    coordinates = hull.to_array()
    if len(coordinates) == 0:
        return coordinates
    return np.vstack((coordinates, coordinates[:1]))


def plot_hull(points: PointSequence, hull: PointSequence, figure_params: FigureParams = None,
              fig=None, axes=None, save_path: str = None) -> (plt.Figure, plt.Axes):
    """ Saving will close the figure."""
    if figure_params is None:
        figure_params = FigureParams(label='Convex hull', title=f'Convex hull of {len(points)} points',
                                     xlabel='x', ylabel='y')

    ax_plot = axes
    fig_plot = fig
    if fig is None and axes is not None:
        raise ValueError("Axes should not be passed without the Figure!")
    if axes is None:
        if fig is not None:
            raise ValueError("Figure should not be passed without the Axes!")
        fig_plot, ax_plot = plt.subplots()

    ax_plot.set_title(figure_params.title, fontsize=11)
    ax_plot.set_xlabel(figure_params.xlabel)
    ax_plot.set_ylabel(figure_params.ylabel)

    coordinates = points.to_array()
    ax_plot.scatter(coordinates[:, 0], coordinates[:, 1], color='black', marker='x', s=10)

    boundary = closed_boundary(hull)
    ax_plot.plot(boundary[:, 0], boundary[:, 1], linestyle='--', label=figure_params.label)

    if save_path is not None:
        ax_plot.legend()
        fig_plot.savefig(save_path)
        plt.close(fig_plot)

    return fig_plot, ax_plot
