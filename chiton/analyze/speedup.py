import os
import pandas as pd
import matplotlib.pyplot as plt


def load_results(csv_path: str) -> pd.DataFrame:
    df = pd.read_csv(csv_path)
    df['time_ms'] = pd.to_numeric(df['time_ms'], errors='coerce')
    return df


def mean_time_by_size(df: pd.DataFrame) -> pd.DataFrame:
    """Mean time per (algo, cells), one column per algorithm, indexed by cell count."""
    return df.groupby(['cells', 'algo'])['time_ms'].mean().unstack('algo').sort_index()


def plot_time_vs_size(csv_path: str, save: bool = False):
    table = mean_time_by_size(load_results(csv_path))

    plt.figure()
    for algo in table.columns:
        plt.plot(table.index, table[algo], marker='o', label=algo)
    plt.xlabel('Cells')
    plt.ylabel('Average Time (ms)')
    plt.title('Time vs Grid Size')
    plt.xscale('log')
    plt.legend()
    plt.grid(True)
    plt.tight_layout()
    if save:
        out_path = os.path.splitext(csv_path)[0] + "_time_vs_size.png"
        plt.savefig(out_path)
        print(f"Saved time plot to {out_path}")
    else:
        plt.show()


def relative_speedup(df: pd.DataFrame, baseline: str = "lazy") -> pd.DataFrame:
    """
    Normalize every algorithm's mean time to the baseline algorithm's time on
    the same grid size. Values above 1 mean faster than the baseline.
    """
    table = mean_time_by_size(df)
    if baseline not in table.columns:
        raise ValueError("Unknown algorithm: {}".format(baseline))
    return table.rdiv(table[baseline], axis=0)


def plot_relative_speedup(csv_path: str, baseline: str = "lazy", save: bool = False):
    speedups = relative_speedup(load_results(csv_path), baseline)

    plt.figure()
    for algo in speedups.columns:
        plt.plot(speedups.index, speedups[algo], marker='o', label=algo)

    plt.xlabel('Cells')
    plt.ylabel(f'Speedup over {baseline}')
    plt.title('Relative Speedup vs Grid Size')
    plt.xscale('log')
    plt.legend()
    plt.grid(True)
    plt.tight_layout()

    if save:
        out_path = os.path.splitext(csv_path)[0] + "_relative_speedup.png"
        plt.savefig(out_path)
        print(f"Saved speedup plot to {out_path}")
    else:
        plt.show()


if __name__ == "__main__":

    csv_path = "./results/benchmark/chiton_results.csv"

    plot_time_vs_size(csv_path, save=True)
    plot_relative_speedup(csv_path, baseline="lazy", save=True)
