#!/usr/bin/env python3
"""
Benchmark script comparing double bond stereo perception between RDKit and stereopy.

Usage:
    python benchmarks/bench_trigonal.py [--extended]

Options:
    --extended    Run every test molecule instead of the largest one only
"""

import sys
import os
import time
from dataclasses import dataclass
from typing import Optional

# Ensure local stereopy is used (not installed version)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Test molecules with stereo double bonds
TEST_MOLECULES = {
    "difluoroethene": "F/C=C/F",
    "retinol": "CC1=C(C(CCC1)(C)C)/C=C/C(=C/C=C/C(=C/CO)/C)/C",
    "tamoxifen": "CC/C(=C(\\c1ccccc1)/c1ccc(OCCN(C)C)cc1)/c1ccccc1",
    "polyene": "C/C=C/C=C/C=C/C=C/C=C/C=C/C=C/C=C/C=C/C=C/C=C/C=C/C",
}

LARGE_MOLECULE = TEST_MOLECULES["polyene"]

ITERATIONS = 2000


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    smiles: str
    time_seconds: float
    iterations: int
    num_stereo_bonds: int

    @property
    def time_per_call_ms(self) -> float:
        return (self.time_seconds / self.iterations) * 1000


def benchmark_rdkit(smiles: str, iterations: int) -> BenchmarkResult:
    """Benchmark RDKit parsing with stereo assignment."""
    from rdkit import Chem

    mol = Chem.MolFromSmiles(smiles)
    if mol is None:
        raise ValueError(f"RDKit failed to parse SMILES: {smiles}")

    start = time.perf_counter()
    for _ in range(iterations):
        mol = Chem.MolFromSmiles(smiles)
        Chem.AssignStereochemistry(mol, cleanIt=True, force=True)
    end = time.perf_counter()

    count = sum(
        1 for b in mol.GetBonds()
        if b.GetStereo() != Chem.BondStereo.STEREONONE
    )
    return BenchmarkResult(smiles, end - start, iterations, count)


def benchmark_stereopy(smiles: str, iterations: int) -> BenchmarkResult:
    """Benchmark stereopy parsing with up/down bond conversion."""
    from stereopy import Trigonal, parse
    from stereopy.stereo import to_trigonal_topology

    # Warmup
    g = to_trigonal_topology(parse(smiles))

    start = time.perf_counter()
    for _ in range(iterations):
        g = to_trigonal_topology(parse(smiles))
    end = time.perf_counter()

    # both ends of a bond carry a topology
    count = sum(1 for u in range(g.order) if isinstance(g.topology_of(u), Trigonal)) // 2
    return BenchmarkResult(smiles, end - start, iterations, count)


def run(molecules: dict[str, str]) -> None:
    """Time both libraries on each molecule and print a table."""
    print("=" * 70)
    print("Double Bond Stereo Benchmark: RDKit vs stereopy")
    print("=" * 70)
    print(f"\nIterations per molecule: {ITERATIONS}")
    print(f"{'Molecule':<16} {'Bonds':>6} {'RDKit ms':>10} {'stereopy ms':>12} {'Ratio':>8}")
    print("-" * 70)

    for name, smiles in molecules.items():
        rdkit_result: Optional[BenchmarkResult] = None
        try:
            rdkit_result = benchmark_rdkit(smiles, ITERATIONS)
        except ImportError:
            pass

        result = benchmark_stereopy(smiles, ITERATIONS)

        if rdkit_result:
            ratio = result.time_seconds / rdkit_result.time_seconds
            print(f"{name:<16} {result.num_stereo_bonds:>6} "
                  f"{rdkit_result.time_per_call_ms:>10.4f} "
                  f"{result.time_per_call_ms:>12.4f} {ratio:>7.2f}x")
        else:
            print(f"{name:<16} {result.num_stereo_bonds:>6} "
                  f"{'N/A':>10} {result.time_per_call_ms:>12.4f} {'N/A':>8}")


def main():
    if "--extended" in sys.argv or "-e" in sys.argv:
        run(TEST_MOLECULES)
    else:
        run({"polyene": LARGE_MOLECULE})
        print("\nTIP: Run with --extended for all test molecules")


if __name__ == "__main__":
    main()
