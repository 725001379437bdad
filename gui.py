import logging

import pygame

from game import NO_MOVE, TicTacToe, winning_line
from minimax_ai import MinimaxAI
from utils import index_to_row_col, row_col_to_index, status_text

logger = logging.getLogger(__name__)


class TicTacToeGUI:
    # Constants
    WIDTH, HEIGHT = 800, 800
    LINE_WIDTH = 15
    BOARD_ROWS, BOARD_COLS = 3, 3
    BOARD_LEFT, BOARD_TOP = 200, 290
    BOARD_SIZE = 400
    CELL_SIZE = BOARD_SIZE // 3

    # Turn pacing (milliseconds)
    COMPUTER_DELAY_MS = 500
    ROUND_RESET_DELAY_MS = 300

    # Colors
    WHITE = (255, 255, 255)
    BLACK = (0, 0, 0)
    RED = (220, 50, 50)
    BLUE = (50, 120, 220)
    LIGHT_BLUE = (100, 170, 255)
    LIGHT_RED = (255, 130, 130)
    GRAY = (200, 200, 200)
    DARK_GRAY = (80, 80, 80)
    BG_COLOR = (240, 240, 245)
    HIGHLIGHT = (170, 255, 170)

    MODE_OPTIONS = [("pvp", "2-Player"), ("pvc", "Vs Computer")]

    def __init__(self):
        pygame.init()

        self.screen = pygame.display.set_mode((self.WIDTH, self.HEIGHT))
        pygame.display.set_caption("Tic-Tac-Toe")
        self.font = pygame.font.Font(None, 36)
        self.title_font = pygame.font.Font(None, 60)
        self.small_font = pygame.font.Font(None, 24)

        self.game = TicTacToe(mode="pvp")
        self.minimax_ai = MinimaxAI()

        # Animation tracking
        self.animations = []
        self.win_animation = None

        # Pending timed actions, as pygame tick deadlines
        self.computer_due_at = None
        self.round_due_at = None

    def cell_center(self, index):
        row, col = index_to_row_col(index)
        center_x = self.BOARD_LEFT + col * self.CELL_SIZE + self.CELL_SIZE // 2
        center_y = self.BOARD_TOP + row * self.CELL_SIZE + self.CELL_SIZE // 2
        return center_x, center_y

    def mark_size(self):
        return self.CELL_SIZE // 2 - 25

    def draw_button(self, text, x, y, width, height, default_color, hover_color):
        mouse_pos = pygame.mouse.get_pos()
        button_rect = pygame.Rect(x, y, width, height)

        if button_rect.collidepoint(mouse_pos):
            pygame.draw.rect(self.screen, hover_color, button_rect, 0, border_radius=10)
            pygame.draw.rect(self.screen, self.DARK_GRAY, button_rect, 2, border_radius=10)
        else:
            pygame.draw.rect(self.screen, default_color, button_rect, 0, border_radius=10)
            pygame.draw.rect(self.screen, self.BLACK, button_rect, 2, border_radius=10)

        text_surf = self.font.render(text, True, self.BLACK)
        text_rect = text_surf.get_rect(center=button_rect.center)
        self.screen.blit(text_surf, text_rect)

        return button_rect

    def draw_header(self):
        title_text = self.title_font.render("TIC-TAC-TOE", True, self.DARK_GRAY)
        self.screen.blit(title_text, (self.WIDTH // 2 - title_text.get_width() // 2, 20))

        mode_rects = {}
        x = self.WIDTH // 2 - 210
        for mode, label in self.MODE_OPTIONS:
            color = self.LIGHT_BLUE if self.game.mode == mode else self.GRAY
            mode_rects[mode] = self.draw_button(label, x, 85, 200, 50, color, self.HIGHLIGHT)
            x += 220
        return mode_rects

    def draw_scoreboard(self):
        card_width, card_height = 160, 70
        gap = 20
        x = self.WIDTH // 2 - (3 * card_width + 2 * gap) // 2
        y = 155

        for label, count in self.game.scoreboard.labels():
            card = pygame.Rect(x, y, card_width, card_height)
            pygame.draw.rect(self.screen, self.WHITE, card, 0, border_radius=10)
            pygame.draw.rect(self.screen, self.DARK_GRAY, card, 2, border_radius=10)

            label_surf = self.small_font.render(label, True, self.BLACK)
            self.screen.blit(label_surf, (card.centerx - label_surf.get_width() // 2, y + 10))
            count_surf = self.font.render(str(count), True, self.BLACK)
            self.screen.blit(count_surf, (card.centerx - count_surf.get_width() // 2, y + 35))

            x += card_width + gap

    def draw_status(self):
        winner = self.game.winner
        if winner == 'X':
            color = self.RED
        elif winner == 'O':
            color = self.BLUE
        elif self.game.is_draw:
            color = self.DARK_GRAY
        else:
            color = self.RED if self.game.current_player == 'X' else self.BLUE

        status_surf = self.font.render(status_text(self.game), True, color)
        self.screen.blit(status_surf, (self.WIDTH // 2 - status_surf.get_width() // 2, 250))

    def draw_board(self):
        board_rect = pygame.Rect(self.BOARD_LEFT, self.BOARD_TOP, self.BOARD_SIZE, self.BOARD_SIZE)
        pygame.draw.rect(self.screen, self.WHITE, board_rect, 0, border_radius=15)
        pygame.draw.rect(self.screen, self.DARK_GRAY, board_rect, 3, border_radius=15)

        for row in range(1, self.BOARD_ROWS):
            y_pos = self.BOARD_TOP + row * self.CELL_SIZE
            pygame.draw.line(self.screen, self.DARK_GRAY,
                             (self.BOARD_LEFT + 10, y_pos),
                             (self.BOARD_LEFT + self.BOARD_SIZE - 10, y_pos),
                             self.LINE_WIDTH // 2)
        for col in range(1, self.BOARD_COLS):
            x_pos = self.BOARD_LEFT + col * self.CELL_SIZE
            pygame.draw.line(self.screen, self.DARK_GRAY,
                             (x_pos, self.BOARD_TOP + 10),
                             (x_pos, self.BOARD_TOP + self.BOARD_SIZE - 10),
                             self.LINE_WIDTH // 2)

        restart_rect = self.draw_button("Restart Game", self.WIDTH // 2 - 260, 720, 240, 50,
                                        self.LIGHT_BLUE, self.HIGHLIGHT)
        reset_all_rect = self.draw_button("Reset All Scores", self.WIDTH // 2 + 20, 720, 240, 50,
                                          self.LIGHT_RED, self.HIGHLIGHT)
        return restart_rect, reset_all_rect

    def draw_marks(self):
        # Update and remove completed animations
        self.animations = [anim for anim in self.animations if not anim.complete]
        for anim in self.animations:
            anim.update()
        animated_cells = {anim.index for anim in self.animations}

        for index, mark in enumerate(self.game.board):
            if mark is None or index in animated_cells:
                continue
            center_x, center_y = self.cell_center(index)
            draw_mark(self.screen, mark, center_x, center_y, self.mark_size(),
                      self.LINE_WIDTH, self.RED, self.BLUE, self.DARK_GRAY)

        for anim in self.animations:
            anim.draw(self.screen, self.LINE_WIDTH, self.RED, self.BLUE, self.DARK_GRAY)

        if self.win_animation:
            self.win_animation.update()
            self.win_animation.draw(self.screen, self.LINE_WIDTH)

    def add_mark_animation(self, index):
        center_x, center_y = self.cell_center(index)
        self.animations.append(
            MarkAnimation(self.game.board[index], index, center_x, center_y, self.mark_size())
        )

    def check_win_line(self):
        if self.win_animation:
            return
        line = winning_line(self.game.board)
        if line is None:
            return
        start = self.cell_center(line[0])
        end = self.cell_center(line[2])
        color = self.RED if self.game.winner == 'X' else self.BLUE
        self.win_animation = WinLineAnimation(start, end, color)

    def clear_animations(self):
        self.animations = []
        self.win_animation = None

    def handle_cell_click(self, mouse_pos):
        x, y = mouse_pos
        board_x = x - self.BOARD_LEFT
        board_y = y - self.BOARD_TOP

        if 0 <= board_x < self.BOARD_SIZE and 0 <= board_y < self.BOARD_SIZE:
            index = row_col_to_index(board_y // self.CELL_SIZE, board_x // self.CELL_SIZE)
            if self.game.make_move(index):
                self.add_mark_animation(index)
                return index
        return None

    def update_timers(self, now):
        """Run the delayed computer move and round reset when they fall due."""
        if self.game.is_computer_turn():
            if self.computer_due_at is None:
                self.computer_due_at = now + self.COMPUTER_DELAY_MS
            elif now >= self.computer_due_at:
                self.computer_due_at = None
                move = self.game.computer_move(self.minimax_ai)
                if move != NO_MOVE:
                    self.add_mark_animation(move)
        else:
            # Restart, reset or a mode switch cancels a pending computer move
            self.computer_due_at = None

        if self.game.is_game_over():
            if self.round_due_at is None:
                self.round_due_at = now + self.ROUND_RESET_DELAY_MS
            elif now >= self.round_due_at:
                self.round_due_at = None
                self.game.finish_round()
                self.clear_animations()
        else:
            self.round_due_at = None

    def run_game(self):
        clock = pygame.time.Clock()
        running = True

        while running:
            self.update_timers(pygame.time.get_ticks())
            self.check_win_line()

            # Draw everything
            self.screen.fill(self.BG_COLOR)
            mode_rects = self.draw_header()
            self.draw_scoreboard()
            self.draw_status()
            restart_rect, reset_all_rect = self.draw_board()
            self.draw_marks()

            pygame.display.update()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    mouse_pos = event.pos

                    if restart_rect.collidepoint(mouse_pos):
                        self.game.reset_board()
                        self.clear_animations()
                    elif reset_all_rect.collidepoint(mouse_pos):
                        self.game.reset_all()
                        self.clear_animations()
                    else:
                        for mode, rect in mode_rects.items():
                            if rect.collidepoint(mouse_pos):
                                logger.info("Mode set to %s", mode)
                                self.game.set_mode(mode)
                                break
                        else:
                            self.handle_cell_click(mouse_pos)

            clock.tick(60)
        pygame.quit()


def draw_mark(screen, mark, center_x, center_y, size, line_width, red_color, blue_color, dark_gray):
    if mark == 'X':
        # Draw shadow
        pygame.draw.line(screen, dark_gray,
                         (center_x - size + 5, center_y - size + 5),
                         (center_x + size + 5, center_y + size + 5),
                         line_width)
        pygame.draw.line(screen, dark_gray,
                         (center_x + size + 5, center_y - size + 5),
                         (center_x - size + 5, center_y + size + 5),
                         line_width)

        # Draw X
        pygame.draw.line(screen, red_color,
                         (center_x - size, center_y - size),
                         (center_x + size, center_y + size),
                         line_width)
        pygame.draw.line(screen, red_color,
                         (center_x + size, center_y - size),
                         (center_x - size, center_y + size),
                         line_width)
    else:  # 'O'
        pygame.draw.circle(screen, dark_gray, (center_x + 5, center_y + 5), size, line_width)
        pygame.draw.circle(screen, blue_color, (center_x, center_y), size, line_width)


class MarkAnimation:
    """Animation for X and O markers appearing on the board"""
    def __init__(self, mark_type, index, center_x, center_y, final_size):
        self.mark_type = mark_type  # 'X' or 'O'
        self.index = index
        self.center_x = center_x
        self.center_y = center_y
        self.final_size = final_size
        self.current_size = 0
        self.growth_speed = final_size / 8  # Takes 8 frames to reach full size
        self.complete = False

    def update(self):
        if self.current_size < self.final_size:
            self.current_size += self.growth_speed
        else:
            self.current_size = self.final_size
            self.complete = True

    def draw(self, screen, line_width, red_color, blue_color, dark_gray):
        size = int(self.current_size)
        if size <= 0:
            return
        draw_mark(screen, self.mark_type, self.center_x, self.center_y, size,
                  line_width, red_color, blue_color, dark_gray)


class WinLineAnimation:
    """Animation for the winning line"""
    def __init__(self, start_pos, end_pos, color):
        self.start_pos = start_pos
        self.end_pos = end_pos
        self.color = color
        self.current_length = 0
        self.total_length = ((end_pos[0] - start_pos[0])**2 +
                             (end_pos[1] - start_pos[1])**2)**0.5
        self.growth_speed = self.total_length / 15  # Takes 15 frames to complete
        self.complete = False

    def update(self):
        if self.current_length < self.total_length:
            self.current_length += self.growth_speed
        else:
            self.current_length = self.total_length
            self.complete = True

    def draw(self, screen, line_width):
        progress = min(1.0, self.current_length / self.total_length)
        current_x = self.start_pos[0] + (self.end_pos[0] - self.start_pos[0]) * progress
        current_y = self.start_pos[1] + (self.end_pos[1] - self.start_pos[1]) * progress

        pygame.draw.line(screen, self.color,
                         self.start_pos,
                         (current_x, current_y),
                         line_width)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s: %(message)s")
    gui = TicTacToeGUI()
    gui.run_game()


if __name__ == "__main__":
    main()
