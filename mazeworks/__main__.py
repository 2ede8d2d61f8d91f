import argparse
import shutil
import sys

import matplotlib.pyplot as plt
import matplotlib.animation as animation
from tqdm import tqdm

from .canvas import RasterCanvas, use_headless_backend
from .config import ConfigurationError, SEARCH_TYPES, VARIANTS
from .scheduler import MazeAnimation, Phase

TARGET_FPS = 30
CANVAS_SIZE = 800
DEFAULT_MAX_FRAMES = 20000

SEARCH_NAMES = {
    'bfs': "Breadth-First Search (BFS)",
    'dfs': "Depth-First Search (DFS)",
    'bibfs': "Bidirectional BFS",
}


class TqdmProgressCallback:
    def __init__(self, total):
        self.pbar = tqdm(total=total, desc="Saving Video", unit="frame", ncols=100)

    def __call__(self, current_frame, total_frames):
        self.pbar.update(1)

    def close(self):
        self.pbar.close()


def parse_walls(text):
    walls = []
    if not text:
        return walls
    for chunk in text.split(';'):
        chunk = chunk.strip()
        if not chunk:
            continue
        try:
            col, row = (int(part) for part in chunk.split(','))
        except ValueError:
            raise argparse.ArgumentTypeError(f"Wall {chunk!r} is not in 'col,row' form") from None
        walls.append((col, row))
    return walls


def build_parser():
    parser = argparse.ArgumentParser(prog='mazeworks', description="Generate and solve an animated maze.")
    parser.add_argument('--dimensions', type=int, default=25)
    parser.add_argument('--variant', choices=VARIANTS, default='maze')
    parser.add_argument('--search', choices=SEARCH_TYPES + ('biBfs',), default='bfs')
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--padding', type=int, default=4)
    parser.add_argument('--line-width', type=int, default=2)
    parser.add_argument('--walls', type=parse_walls, default=[],
                        help="pathfinder walls as 'col,row;col,row'")
    parser.add_argument('--max-frames', type=int, default=DEFAULT_MAX_FRAMES)
    parser.add_argument('--output', default='maze.png',
                        help="'.png' saves the final frame, '.mp4' records every frame")
    return parser


def place_walls(maze, walls):
    placed = 0
    for col, row in walls:
        if maze.make_wall((col, row)):
            placed += 1
        else:
            print(f"⚠️  Skipping wall at ({col}, {row})")
    maze.on_mouse_down(False)
    return placed


def record_video(maze, canvas, output_file, max_frames, title):
    ffmpeg_path = shutil.which('ffmpeg')
    if not ffmpeg_path:
        print("WARNING: ffmpeg not found. Animation saving will likely fail.")
        print("Please install ffmpeg and ensure it's in your system's PATH.")
    else:
        plt.rcParams['animation.ffmpeg_path'] = ffmpeg_path

    fig, axes, image = canvas.to_figure(title)

    def frames():
        count = 0
        yield count
        while not maze.settled and count < max_frames:
            maze.tick()
            count += 1
            yield count

    def update(_):
        image.set_data(canvas.pixels)
        return (image,)

    ani = animation.FuncAnimation(fig, update, frames=frames, blit=False,
                                  interval=1000 / TARGET_FPS, repeat=False,
                                  save_count=max_frames + 1, cache_frame_data=False)
    writer = animation.FFMpegWriter(fps=TARGET_FPS, metadata=dict(artist='mazeworks'), bitrate=5000)
    progress_bar = TqdmProgressCallback(max_frames + 1)
    try:
        ani.save(output_file, writer=writer, progress_callback=progress_bar)
    finally:
        progress_bar.close()
        plt.close(fig)


def main(argv=None):
    args = build_parser().parse_args(argv)
    use_headless_backend()

    options = {
        'dimensions': args.dimensions,
        'variant': args.variant,
        'searchType': args.search,
        'seed': args.seed,
        'padding': args.padding,
        'lineWidth': args.line_width,
    }
    canvas = RasterCanvas(CANVAS_SIZE, CANVAS_SIZE)
    try:
        maze = MazeAnimation(canvas, options)
    except ConfigurationError as e:
        print(f"❌ {e}")
        return 2

    search_name = SEARCH_NAMES[maze.search_type]
    print("≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈")
    print(f"📱 GENERATING & SOLVING MAZE ANIMATION - {maze.dimensions}x{maze.dimensions} {maze.variant.upper()} 📱")
    print(f"Generation: Recursive Backtracker - Solving: {search_name}")
    print("≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈")

    if maze.variant == 'grid':
        print(f"🧱 Placing {len(args.walls)} walls...")
        place_walls(maze, args.walls)
        maze.on_solve()
    else:
        print(f"🧩 Generating maze using Recursive Backtracker ({maze.dimensions}x{maze.dimensions})...")

    if args.output.endswith('.mp4'):
        print(f"💾 Saving animation to {args.output}...")
        print("    (This may take several minutes for high quality)")
        record_video(maze, canvas, args.output, args.max_frames, search_name)
    else:
        print(f"🔍 Solving maze using {search_name}...")
        ticks = maze.run(args.max_frames)
        print(f"🎬 Ran {ticks} frames")
        canvas.save(args.output)
        print(f"💾 Saved final frame to {args.output}")

    if maze.phase is Phase.NO_SOLUTION:
        print(f"🚫 {maze.notice}")
        return 1
    if maze.phase is Phase.COMPLETE:
        print(f"✅ Solved! Path length: {len(maze.solve_path)} cells")
        return 0
    print(f"⏸️  Stopped in phase '{maze.phase.value}' after {maze.frame_count} frames")
    return 0


if __name__ == "__main__":
    sys.exit(main())
