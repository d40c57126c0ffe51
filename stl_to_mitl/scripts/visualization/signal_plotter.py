import matplotlib.pyplot as plt
from matplotlib import gridspec
import os


class SignalPlotter:
    def __init__(self, show_plots=True, save_plots=False, plots_folder="./plots"):
        self.show_plots = show_plots
        self.save_plots = save_plots
        self.plots_folder = plots_folder
        self.saved_plot_files = []
        self.fig = None
        self.axes = []

        if self.save_plots and not os.path.exists(self.plots_folder):
            os.makedirs(self.plots_folder)

    def set_limits(self, horizon):
        """
        Set the time range and the Boolean axis of every subplot.

        Args:
            horizon (float): Last time shown on the x axis.
        """
        for ax in self.axes:
            ax.set_xlim(0, horizon)
            ax.set_ylim(-0.2, 1.2)
            ax.set_yticks([0, 1])
            ax.set_yticklabels(["F", "T"])
            ax.grid(True)
            ax.tick_params(axis='both', which='major', labelsize=10)

        self.axes[-1].set_xlabel("Time [s]", fontsize=14)

    def forward(self, signal, partition_points=None):
        """
        Plot the Boolean traces of the signal and the stable partition points.

        Args:
            signal (Signal): Synthesized signal.
            partition_points (list, optional): Integer partition points. Defaults to None.

        Returns:
            matplotlib.figure.Figure: Figure object.
        """
        n_labels = len(signal.labels)
        self.fig = plt.figure(figsize=(12, 2.5 * n_labels))
        self.fig.suptitle("Synthesized Signal and Stable Partitions", fontsize=18)
        gs = gridspec.GridSpec(n_labels, 1)
        gs.update(hspace=0.5)
        self.axes = [self.fig.add_subplot(gs[i, 0]) for i in range(n_labels)]

        colors = ['g', 'm', 'orange']
        for idx, (ax, label) in enumerate(zip(self.axes, signal.labels)):
            ax.step(signal.times, signal.values[:, idx].astype(int), where='post',
                    color=colors[idx % len(colors)], label=label)
            ax.set_title(label, fontsize=14)

            for t in partition_points or []:
                ax.axvline(x=t, color='red', linestyle='--', linewidth=1)

        horizon = float(signal.times[-1]) if len(signal) > 0 else 1.
        self.set_limits(horizon)

        if self.save_plots:
            fname = os.path.join(self.plots_folder, "signal_partitions.png")
            self.fig.savefig(fname, dpi=150)
            self.saved_plot_files.append(fname)
            print(f"Saved: {fname}")

        if self.show_plots:
            plt.show()

        return self.fig

    def close(self):
        """
        Close the current figure, if any.
        """
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
