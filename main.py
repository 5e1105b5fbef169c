import argparse
from seawater_utils.thermo.internal_energy import internal_energy_CT
from seawater_utils.cli import main as cli_main

def point(SA, CT, p):
    """Internal energy [J/kg] of a single (SA, CT, p) sample."""
    return float(internal_energy_CT([[SA]], [[CT]], p)[0, 0])

def main():
    """
    Either run a YAML-configured job (same as the seawater_utils CLI) or
    evaluate one sample:
        python main.py --config cfg.yaml run
        python main.py --point 35 10 100
    """
    ap = argparse.ArgumentParser(add_help=False)
    ap.add_argument("--point", nargs=3, type=float, metavar=("SA", "CT", "P"))
    args, rest = ap.parse_known_args()
    if args.point is not None:
        SA, CT, p = args.point
        print(f"internal_energy = {point(SA, CT, p):.6f} J/kg")
        return
    cli_main(rest)

if __name__ == "__main__":
    main()
