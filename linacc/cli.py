# linacc/cli.py
import os
import sys
import argparse
from .params import Q, MAX_ROWS, DEFAULT_HASH, LinaccParams, bcolors
from .hashing import HASHES, seed_from_text
from .validation import validate_seed, validate_params, validate_step_index
from .matrix import derive_row
from .accumulator import accumulate, update, update_many
from .packing import xor_all
from .diagnostics import matrix_rank
from .serialization import parse_int, parse_words, words_to_hex, write_packed_json, read_packed_json

# -----------------------------
# Argument Helpers
# -----------------------------
def resolve_seed(args) -> bytes:
    if args.seed is not None:
        h = args.seed[2:] if args.seed.lower().startswith("0x") else args.seed
        return validate_seed(bytes.fromhex(h))
    return seed_from_text(args.seed_text, args.hash)

def params_from_args(args) -> LinaccParams:
    return LinaccParams(num_rows=args.rows, q=args.q, hash_name=args.hash)

def resolve_acc(args) -> list:
    if args.acc_file:
        words, _ = read_packed_json(args.acc_file)
        return words
    if args.acc:
        return parse_words(args.acc)
    raise ValueError("Either --acc or --acc_file is required")

def print_packed(words, title: str):
    print(f"{bcolors.OKCYAN}{title}{bcolors.ENDC}")
    for i, w in enumerate(words_to_hex(words)):
        print(f"  {bcolors.BOLD}word[{i}]{bcolors.ENDC} {w}")

def emit(words, args, step_index: int = None):
    print_packed(words, "Packed output:")
    if args.out_file:
        write_packed_json(args.out_file, words, params_from_args(args), step_index)
        print(f"{bcolors.OKGREEN}Saved to {args.out_file}{bcolors.ENDC}")

def add_common(p, out=True):
    seed = p.add_mutually_exclusive_group(required=True)
    seed.add_argument("--seed", help="32-byte seed as hex")
    seed.add_argument("--seed_text", help="Text hashed into the seed, e.g. test-seed")
    p.add_argument("--rows", type=int, default=MAX_ROWS, help="Matrix dimension N (1..64)")
    p.add_argument("--q", type=int, default=Q, help="Modulus (2..65521)")
    p.add_argument("--hash", choices=sorted(HASHES), default=DEFAULT_HASH, help="Digest used for row derivation")
    if out:
        p.add_argument("--out_file", help="Write the packed result as JSON")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="linacc", description="Seeded linear accumulator over Z_q")
    subparsers = parser.add_subparsers(dest="command")

    acc_parser = subparsers.add_parser("accumulate", help="Compute y = A.x mod q")
    acc_parser.add_argument("--input", required=True, type=parse_int, help="Input bits (decimal or 0x hex)")
    acc_parser.add_argument("--step", required=True, type=parse_int, help="Step index")
    add_common(acc_parser)

    upd_parser = subparsers.add_parser("update", help="Fold a new input into a packed accumulator")
    upd_parser.add_argument("--acc", help="Four packed words, comma separated")
    upd_parser.add_argument("--acc_file", help="JSON file holding the packed accumulator")
    upd_parser.add_argument("--input", required=True, type=parse_int, help="New input")
    upd_parser.add_argument("--step", required=True, type=parse_int, help="Step index")
    add_common(upd_parser)

    fold_parser = subparsers.add_parser("fold", help="Fold a sequence of inputs at consecutive steps")
    fold_parser.add_argument("--inputs", required=True, help="Inputs, comma separated")
    fold_parser.add_argument("--start_step", type=parse_int, default=0, help="Step index of the first input")
    add_common(fold_parser)

    xor_parser = subparsers.add_parser("xor", help="Xor the four packed words together")
    xor_parser.add_argument("--acc", help="Four packed words, comma separated")
    xor_parser.add_argument("--acc_file", help="JSON file holding the packed accumulator")

    row_parser = subparsers.add_parser("row", help="Print one derived matrix row")
    row_parser.add_argument("--step", required=True, type=parse_int, help="Step index")
    row_parser.add_argument("--row", required=True, type=int, help="Row number")
    add_common(row_parser, out=False)

    rank_parser = subparsers.add_parser("rank", help="Rank of the derived matrix over GF(q)")
    rank_parser.add_argument("--step", required=True, type=parse_int, help="Step index")
    add_common(rank_parser, out=False)
    return parser

# -----------------------------
# Commands
# -----------------------------
def run_command(args):
    match args.command:
        case "accumulate":
            words = accumulate(args.input, args.step, args.rows, resolve_seed(args), args.q, args.hash)
            emit(words, args, args.step)
        case "update":
            words = update(resolve_acc(args), args.input, args.step, args.rows, resolve_seed(args), args.q, args.hash)
            emit(words, args, args.step)
        case "fold":
            inputs = [parse_int(s) for s in args.inputs.replace(",", " ").split()]
            words = update_many(inputs, args.start_step, args.rows, resolve_seed(args), args.q, hash_name=args.hash)
            emit(words, args, args.start_step + len(inputs) - 1 if inputs else None)
        case "xor":
            print(f"0x{xor_all(resolve_acc(args)):064x}")
        case "row":
            seed = validate_params(args.rows, args.q, resolve_seed(args))
            validate_step_index(args.step)
            if not 0 <= args.row < args.rows:
                raise ValueError(f"row must be in [0, {args.rows}), got {args.row}")
            row = derive_row(seed, args.step, args.row, args.rows, args.q, args.hash)
            print(" ".join(str(int(v)) for v in row))
        case "rank":
            r = matrix_rank(resolve_seed(args), args.step, args.rows, args.q, args.hash)
            colour = bcolors.OKGREEN if r == args.rows else bcolors.WARNING
            print(f"{colour}rank {r} / {args.rows}{bcolors.ENDC}")

# -----------------------------
# Interactive Menu
# -----------------------------
def menu_params():
    rows = int(input(f"Matrix dimension N (default {MAX_ROWS}): ").strip() or MAX_ROWS)
    q = int(input(f"Modulus q (default {Q}): ").strip() or Q)
    seed_text = input("Seed text (default test-seed): ").strip() or "test-seed"
    return LinaccParams(num_rows=rows, q=q), seed_from_text(seed_text)

def menu_accumulate():
    params, seed = menu_params()
    x = parse_int(input("Input bits: ").strip() or "0")
    step = parse_int(input("Step index (default 0): ").strip() or "0")
    print_packed(accumulate(x, step, params.num_rows, seed, params.q), "Packed output:")

def menu_update():
    params, seed = menu_params()
    acc = parse_words(input("Accumulator words (comma separated): ").strip())
    x = parse_int(input("New input: ").strip() or "0")
    step = parse_int(input("Step index (default 0): ").strip() or "0")
    print_packed(update(acc, x, step, params.num_rows, seed, params.q), "Packed output:")

def menu_xor():
    acc = parse_words(input("Accumulator words (comma separated): ").strip())
    print(f"0x{xor_all(acc):064x}")

def interactive():
    while True:
        print(f"{bcolors.OKCYAN}linacc - seeded linear accumulator over Z_q{bcolors.ENDC}")
        print(f"{bcolors.GREY}Linear map, not a collision-resistant hash.{bcolors.ENDC}")
        print("")
        print(f"{bcolors.BOLD}1){bcolors.ENDC} Accumulate")
        print(f"{bcolors.BOLD}2){bcolors.ENDC} Update accumulator")
        print(f"{bcolors.BOLD}3){bcolors.ENDC} Xor packed words")
        print(f"{bcolors.BOLD}0){bcolors.ENDC} Exit")
        choice = input(f"{bcolors.BOLD}Choice: {bcolors.ENDC}").strip()
        try:
            match choice:
                case "0":
                    break
                case "1":
                    menu_accumulate()
                case "2":
                    menu_update()
                case "3":
                    menu_xor()
                case _:
                    print("Invalid choice")
        except ValueError as e:
            print(f"{bcolors.FAIL}ERROR:{bcolors.ENDC}", e)
        _ = input(f"{bcolors.OKGREEN}Any Key to Continue{bcolors.ENDC}")
        _ = os.system("cls") | os.system("clear")

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command is None:
            interactive()
        else:
            run_command(args)
    except (ValueError, OSError) as e:
        print(f"{bcolors.FAIL}ERROR:{bcolors.ENDC}", e)
        sys.exit(1)

if __name__ == "__main__":
    main()
