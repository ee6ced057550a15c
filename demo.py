import asyncio, aioconsole, logging, gyrocube, argparse, contextlib

logging.basicConfig(level=logging.INFO)

parser = argparse.ArgumentParser()
parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
parser.add_argument("-s", "--seed", type=int, default=None, help="Seed for scrambles")
parser.add_argument("--speed", type=float, default=4.0, help="Animation units advanced per second")
args = parser.parse_args()

if args.debug: gyrocube.LOGGER.setLevel(logging.DEBUG)

TICK = 0.05

def parse_cell(s: str) -> gyrocube.CellLocation:
    s = s.upper()
    return next(c for c in gyrocube.CellLocation if c.name == s or str(c) == s)

async def ticker(ctrl: gyrocube.PuzzleController):
    #Advance pending moves in real time
    while True:
        ctrl.update(TICK)
        await asyncio.sleep(TICK)

async def command_loop(ctrl: gyrocube.PuzzleController):
    while True:
        cmd, *cargs = (await aioconsole.ainput("> ")).strip().split() or [""]
        cmd = cmd.lower()
        try:
            if cmd == "h" or cmd == "help":
                print("(h)elp:               Shows this help text")
                print("(q)uit:               Exits the demo")
                print("(s)tatus:             Shows the puzzle status")
                print("(p)rint:              Prints every piece of the puzzle")
                print("(m)oves:              Shows moves being committed in real time")
                print("(t)urn <cell> <dir>:  Turns L/R/I/O about YZ/ZY/ZX/XZ/XY/YX")
                print("(g)yro <cell>:        Gyrates L/R/U/D/F/B")
                print("(r)otate <dir>:       Rotates the whole puzzle about YZ/ZY")
                print("(o)uter:              Gyrates the outer slice")
                print("middle <-1|0|+1>:     Moves or flips the middle slice")
                print("(u)ndo / redo:        Undoes / redoes the last move")
                print("reset:                Resets the puzzle to its solved state")
                print("scramble [0-8]:       Scrambles the puzzle (0 = full)")
                print("(d)ebug:              Toggles debug logging")
            elif cmd == "q" or cmd == "quit":
                print("Exiting...")
                break
            elif cmd == "s" or cmd == "status":
                print(ctrl.get_status())
                pend = ctrl.pending_move()
                if pend: print(f"pending: {pend.move} {pend.fraction * 100:.0f}%")
            elif cmd == "p" or cmd == "print":
                print(ctrl.snapshot())
            elif cmd == "m" or cmd == "moves":
                def move_cb(state: gyrocube.PuzzleState, move: gyrocube.Move):
                    print(f"MOVE | {move} | solved={state.is_solved}")

                ctrl.queue.register_handler(move_cb)
                await aioconsole.ainput("Press ENTER to stop\n")
                ctrl.queue.unregister_handler(move_cb)
            elif cmd == "t" or cmd == "turn":
                ok = ctrl.request_rotate(parse_cell(cargs[0]), gyrocube.RotateDirection[cargs[1].upper()])
                if not ok: print("Turn not possible right now")
            elif cmd == "g" or cmd == "gyro":
                if not ctrl.request_gyro(parse_cell(cargs[0])): print("Gyro not possible right now")
            elif cmd == "r" or cmd == "rotate":
                if not ctrl.request_rotate_puzzle(gyrocube.RotateDirection[cargs[0].upper()]): print("Rotation not possible")
            elif cmd == "o" or cmd == "outer":
                if not ctrl.request_gyro_outer(): print("Outer slice gyro not possible right now")
            elif cmd == "middle":
                if not ctrl.request_gyro_middle(int(cargs[0])): print("Middle slice move not possible right now")
            elif cmd == "u" or cmd == "undo":
                if not ctrl.undo_move(): print("Nothing to undo")
            elif cmd == "redo":
                if not ctrl.redo_move(): print("Nothing to redo")
            elif cmd == "reset":
                ctrl.reset_puzzle()
            elif cmd == "scramble":
                ctrl.scramble_puzzle(int(cargs[0]) if cargs else 0)
                print(ctrl.get_status())
            elif cmd == "d" or cmd == "debug":
                if gyrocube.LOGGER.level != logging.DEBUG:
                    gyrocube.LOGGER.setLevel(logging.DEBUG)
                    print("Enabled debug logging")
                else:
                    gyrocube.LOGGER.setLevel(logging.INFO)
                    print("Disabled debug logging")
            elif cmd == "": pass
            else: print("Unknown command")
        except (IndexError, KeyError, ValueError, StopIteration) as e:
            print(f"Invalid arguments for '{cmd}': {e!r}")

async def main():
    ctrl = gyrocube.PuzzleController(seed=args.seed, speed=args.speed)
    print(f"Puzzle ready: {ctrl.get_status()}")

    tick_task = asyncio.ensure_future(ticker(ctrl))
    try: await command_loop(ctrl)
    finally:
        tick_task.cancel()
        with contextlib.suppress(asyncio.CancelledError): await tick_task

asyncio.run(main())
