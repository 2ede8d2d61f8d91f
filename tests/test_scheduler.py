import unittest

from mazeworks.canvas import RasterCanvas
from mazeworks.cell import OPEN, WALL
from mazeworks.config import ConfigurationError
from mazeworks.scheduler import MazeAnimation, Phase, NO_SOLUTION_NOTICE

MAX_TICKS = 5000


def new_canvas():
    return RasterCanvas(60, 60)


def grid_animation(dimensions=5, **options):
    options.update({'dimensions': dimensions, 'variant': 'grid', 'padding': 0})
    return MazeAnimation(new_canvas(), options)


class TestConstruction(unittest.TestCase):

    def test_missing_canvas(self):
        with self.assertRaises(ConfigurationError):
            MazeAnimation(None, {'dimensions': 5})

    def test_canvas_without_drawing_primitives(self):
        with self.assertRaises(ConfigurationError):
            MazeAnimation(object(), {'dimensions': 5})

    def test_non_positive_dimensions(self):
        with self.assertRaises(ConfigurationError):
            MazeAnimation(new_canvas(), {'dimensions': 0})
        with self.assertRaises(ConfigurationError):
            MazeAnimation(new_canvas(), {'dimensions': '-4'})

    def test_defaults(self):
        maze = MazeAnimation(new_canvas())
        self.assertEqual(maze.dimensions, 10)
        self.assertEqual(maze.search_type, 'bfs')
        self.assertEqual(maze.generations_per_frame, 1)
        self.assertIs(maze.phase, Phase.GENERATING)

    def test_grid_variant_waits_for_user(self):
        maze = grid_animation()
        self.assertIs(maze.phase, Phase.WAITING)
        self.assertIsNone(maze.generator)
        maze.tick()
        self.assertIs(maze.phase, Phase.WAITING)


class TestMazeLifecycle(unittest.TestCase):

    def test_runs_through_every_phase(self):
        maze = MazeAnimation(new_canvas(), {'dimensions': 5, 'seed': 3, 'padding': 0})
        seen = [maze.phase]
        for _ in range(MAX_TICKS):
            phase = maze.tick()
            if phase is not seen[-1]:
                seen.append(phase)
            if maze.settled:
                break
        self.assertEqual(seen, [Phase.GENERATING, Phase.SEARCHING, Phase.SOLVING, Phase.COMPLETE])
        self.assertEqual(maze.grid.carved_passages(), 24)
        self.assertIs(maze.solve_path[0], maze.grid.start)
        self.assertIs(maze.solve_path[-1], maze.grid.end)

    def test_solved_cells_are_painted(self):
        maze = MazeAnimation(new_canvas(), {'dimensions': 3, 'seed': 1, 'padding': 0})
        maze.run(MAX_TICKS)
        for cell in maze.solve_path:
            self.assertEqual(cell.current_fill_color.tolist(), [25, 178, 255])

    def test_complete_keeps_draining_without_new_work(self):
        maze = MazeAnimation(new_canvas(), {'dimensions': 3, 'seed': 1})
        maze.run(MAX_TICKS)
        self.assertIs(maze.phase, Phase.COMPLETE)
        frame = maze.frame_count
        self.assertIs(maze.tick(), Phase.COMPLETE)
        self.assertEqual(maze.frame_count, frame + 1)

    def test_generation_finishes_before_search_starts(self):
        maze = MazeAnimation(new_canvas(), {'dimensions': 4, 'seed': 9})
        while maze.phase is Phase.GENERATING:
            maze.tick()
        self.assertTrue(maze.generator.done)
        self.assertIsNone(maze.search)
        while maze.is_waiting_for_animation:
            maze.tick()
        self.assertFalse(maze.animation_queue)

    def test_each_search_type_solves(self):
        for search_type in ('bfs', 'dfs', 'biBfs'):
            maze = MazeAnimation(new_canvas(), {'dimensions': 6, 'seed': 4, 'searchType': search_type})
            maze.run(MAX_TICKS)
            self.assertIs(maze.phase, Phase.COMPLETE)
            self.assertIs(maze.solve_path[0], maze.grid.start)
            self.assertIs(maze.solve_path[-1], maze.grid.end)

    def test_single_cell_maze(self):
        maze = MazeAnimation(new_canvas(), {'dimensions': 1})
        maze.run(MAX_TICKS)
        self.assertIs(maze.phase, Phase.COMPLETE)
        self.assertEqual(maze.solve_path, [maze.grid.start])


class TestBudgets(unittest.TestCase):

    def test_generation_tick_is_bounded(self):
        for budget in (1, 4, 9):
            maze = MazeAnimation(new_canvas(), {'dimensions': 40, 'generationsPerFrame': budget})
            for _ in range(5):
                before = maze.generator.iterations
                maze.tick()
                self.assertEqual(maze.generator.iterations - before, budget)

    def test_default_generation_budget_scales(self):
        maze = MazeAnimation(RasterCanvas(200, 200), {'dimensions': 100})
        self.assertEqual(maze.generations_per_frame, 30)
        before = maze.generator.iterations
        maze.tick()
        self.assertLessEqual(maze.generator.iterations - before, 30)

    def test_search_tick_is_bounded(self):
        maze = grid_animation(8, searchesPerFrame=3)
        maze.on_solve()
        maze.tick()
        self.assertEqual(maze.search.expansions, 3)
        maze.tick()
        self.assertEqual(maze.search.expansions, 6)

    def test_solve_playback_is_bounded(self):
        maze = grid_animation(8, solvePathsPerFrame=2)
        maze.on_solve()
        while maze.phase is not Phase.SOLVING:
            maze.tick()
        while maze.is_waiting_for_animation:
            maze.tick()
        remaining = len(maze.playback)
        maze.tick()
        self.assertEqual(len(maze.playback), remaining - 2)


class TestReset(unittest.TestCase):

    def test_reset_twice_keeps_invariants(self):
        maze = MazeAnimation(new_canvas(), {'dimensions': 6})
        options = {'dimensions': 5, 'padding': 0}
        for _ in range(2):
            maze.reset(options)
            self.assertIs(maze.phase, Phase.GENERATING)
            self.assertEqual(maze.frame_count, 0)
            self.assertEqual(len(maze.grid), 25)
            maze.run(MAX_TICKS)
            self.assertIs(maze.phase, Phase.COMPLETE)
            self.assertEqual(maze.grid.carved_passages(), 24)
            self.assertFalse(maze.grid.start.walls['N'])
            self.assertFalse(maze.grid.end.walls['S'])

    def test_reset_without_options_reuses_previous(self):
        maze = MazeAnimation(new_canvas(), {'dimensions': 7, 'searchType': 'dfs'})
        old_grid = maze.grid
        maze.reset()
        self.assertIsNot(maze.grid, old_grid)
        self.assertEqual(maze.dimensions, 7)
        self.assertEqual(maze.search_type, 'dfs')

    def test_reset_rejects_bad_options(self):
        maze = MazeAnimation(new_canvas(), {'dimensions': 3})
        with self.assertRaises(ConfigurationError):
            maze.reset({'dimensions': -1})


class TestWallEditing(unittest.TestCase):

    def setUp(self):
        self.maze = grid_animation(5)

    def click(self, col, row):
        # 60px canvas, 5 cells: each cell is 12px wide
        self.maze.on_mouse_move(col * 12 + 6, row * 12 + 6)
        self.maze.on_mouse_down(True)
        self.maze.on_mouse_down(False)

    def test_mouse_position_maps_to_cell(self):
        self.maze.on_mouse_move(30, 59)
        self.assertEqual(self.maze.mouse, (2, 4))

    def test_toggle_round_trip_leaves_no_residue(self):
        cell = self.maze.grid[(2, 3)]
        self.click(2, 3)
        self.assertEqual(cell.type, WALL)
        self.click(2, 3)
        self.assertEqual(cell.type, OPEN)
        self.assertFalse(cell.is_newly_placed)
        self.assertFalse(cell.search_visited)
        self.assertFalse(cell.search_visited2)
        self.assertIsNone(cell.solve_parent)

    def test_drag_toggles_each_cell_once(self):
        self.maze.on_mouse_move(18, 18)
        self.maze.on_mouse_down(True)
        self.maze.on_mouse_move(20, 20)
        self.maze.on_mouse_move(30, 18)
        self.assertEqual(self.maze.grid[(1, 1)].type, WALL)
        self.assertEqual(self.maze.grid[(2, 1)].type, WALL)
        self.assertTrue(self.maze.grid[(1, 1)].is_newly_placed)
        self.maze.on_mouse_down(False)
        self.assertFalse(any(cell.is_newly_placed for cell in self.maze.grid))

    def test_start_and_end_are_protected(self):
        self.click(0, 0)
        self.click(4, 4)
        self.assertEqual(self.maze.grid.start.type, OPEN)
        self.assertEqual(self.maze.grid.end.type, OPEN)

    def test_no_edits_while_searching(self):
        self.maze.on_solve()
        self.click(2, 2)
        self.assertEqual(self.maze.grid[(2, 2)].type, OPEN)

    def test_maze_cells_cannot_be_edited(self):
        maze = MazeAnimation(new_canvas(), {'dimensions': 5})
        self.assertFalse(maze.make_wall((2, 2)))


class TestNoSolution(unittest.TestCase):

    def setUp(self):
        self.maze = grid_animation(5)
        for row in range(5):
            self.assertTrue(self.maze.make_wall((2, row)))
        self.maze.on_mouse_down(False)

    def test_disconnected_grid_reports_no_solution(self):
        self.assertTrue(self.maze.on_solve())
        ticks = self.maze.run(MAX_TICKS)
        self.assertLess(ticks, MAX_TICKS)
        self.assertIs(self.maze.phase, Phase.NO_SOLUTION)
        self.assertTrue(self.maze.no_solution)
        self.assertEqual(self.maze.notice, NO_SOLUTION_NOTICE)
        self.assertEqual(self.maze.solve_path, [])
        # stays put
        self.maze.tick()
        self.assertIs(self.maze.phase, Phase.NO_SOLUTION)

    def test_bidirectional_reports_no_solution(self):
        self.maze.on_search_selection('biBfs')
        self.maze.on_solve()
        self.maze.run(MAX_TICKS)
        self.assertIs(self.maze.phase, Phase.NO_SOLUTION)

    def test_opening_a_wall_makes_it_solvable_again(self):
        self.maze.on_solve()
        self.maze.run(MAX_TICKS)
        self.assertTrue(self.maze.make_wall((2, 2)))
        self.maze.on_mouse_down(False)
        self.assertIs(self.maze.phase, Phase.WAITING)
        self.assertIsNone(self.maze.notice)
        self.assertFalse(any(cell.search_visited for cell in self.maze.grid))
        self.maze.on_solve()
        self.maze.run(MAX_TICKS)
        self.assertIs(self.maze.phase, Phase.COMPLETE)
        self.assertIn(self.maze.grid[(2, 2)], self.maze.solve_path)


class TestSearchSelection(unittest.TestCase):

    def test_selection_before_solving(self):
        maze = grid_animation(5)
        self.assertTrue(maze.on_search_selection('dfs'))
        maze.on_solve()
        maze.tick()
        self.assertEqual(maze.search.name, 'dfs')

    def test_selection_locked_while_searching(self):
        maze = grid_animation(9)
        maze.on_solve()
        maze.tick()
        self.assertFalse(maze.on_search_selection('dfs'))
        self.assertEqual(maze.search_type, 'bfs')

    def test_selection_during_generation(self):
        maze = MazeAnimation(new_canvas(), {'dimensions': 4, 'seed': 2})
        maze.tick()
        self.assertTrue(maze.on_search_selection('bibfs'))
        maze.run(MAX_TICKS)
        self.assertEqual(maze.search.name, 'bibfs')

    def test_unknown_selection(self):
        maze = grid_animation(5)
        with self.assertRaises(ConfigurationError):
            maze.on_search_selection('greedy')

    def test_solve_only_from_idle(self):
        maze = MazeAnimation(new_canvas(), {'dimensions': 4})
        self.assertFalse(maze.on_solve())


if __name__ == '__main__':
    unittest.main()
