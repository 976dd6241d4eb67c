import pygame
import sys
import asyncio

from maze_data import (
    CELL_SIZE,
    Cell,
    handle_directional_input,
    is_goal_reached,
    maze_to_rows,
    new_session,
)

# ==== DETECT WEB ====
IS_WEB = sys.platform == "emscripten"

# ==== KONFIGURASI ====
MAZE_WIDTH = 21
MAZE_HEIGHT = 21
MOVE_DELAY = 120  # ms between steps while an arrow key is held

# ==== INISIALISASI PYGAME ====
pygame.init()

# ==== SCREEN SETUP ====
PANEL_HEIGHT = 60
SCREEN_WIDTH = MAZE_WIDTH * CELL_SIZE
SCREEN_HEIGHT = MAZE_HEIGHT * CELL_SIZE + PANEL_HEIGHT
screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
pygame.display.set_caption("Classic Maze Game")

# ==== WARNA ====
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED   = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (40, 90, 255)
GRAY = (128, 128, 128)

# ==== FONT ====
font_small = pygame.font.SysFont(None, 24)
font_large = pygame.font.SysFont(None, 48)
font_huge = pygame.font.SysFont(None, 72)

# Arrow keys -> movement intents
KEY_DIRECTIONS = [
    (pygame.K_UP, "up"),
    (pygame.K_DOWN, "down"),
    (pygame.K_LEFT, "left"),
    (pygame.K_RIGHT, "right"),
]


def start_session():
    """Generate a fresh maze and put the player on the start cell"""
    session = new_session(MAZE_WIDTH, MAZE_HEIGHT)
    print(f"🎮 Maze {MAZE_WIDTH}x{MAZE_HEIGHT} generated, goal at {session.goal}")
    if not IS_WEB:
        print("\n".join(maze_to_rows(session.grid, start=session.position, goal=session.goal)))
    return session


def read_direction(keys):
    for key, direction in KEY_DIRECTIONS:
        if keys[key]:
            return direction
    return None


def draw(session, won):
    screen.fill(WHITE)

    for r, row in enumerate(session.grid):
        for c, cell in enumerate(row):
            if cell is Cell.WALL:
                rect = pygame.Rect(c * CELL_SIZE, r * CELL_SIZE, CELL_SIZE, CELL_SIZE)
                pygame.draw.rect(screen, BLACK, rect)

    goal_x, goal_y = session.goal
    goal_rect = pygame.Rect(goal_x * CELL_SIZE, goal_y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, RED, goal_rect)

    player_x, player_y = session.position
    player_rect = pygame.Rect(player_x * CELL_SIZE, player_y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, BLUE, player_rect)

    # UI panel
    ui_y = MAZE_HEIGHT * CELL_SIZE
    pygame.draw.rect(screen, GRAY, (0, ui_y, SCREEN_WIDTH, PANEL_HEIGHT))
    hint = "Press R to Restart" if won else "Arrow keys to move"
    hint_text = font_small.render(hint, True, WHITE)
    screen.blit(hint_text, hint_text.get_rect(center=(SCREEN_WIDTH // 2, ui_y + PANEL_HEIGHT // 2)))

    # Win screen
    if won:
        overlay = pygame.Surface((SCREEN_WIDTH, MAZE_HEIGHT * CELL_SIZE))
        overlay.set_alpha(200)
        overlay.fill(BLACK)
        screen.blit(overlay, (0, 0))

        win_text = font_huge.render("YOU WIN!", True, GREEN)
        screen.blit(win_text, win_text.get_rect(center=(SCREEN_WIDTH // 2, ui_y // 2 - 30)))

        restart_text = font_large.render("Press R to Restart", True, WHITE)
        screen.blit(restart_text, restart_text.get_rect(center=(SCREEN_WIDTH // 2, ui_y // 2 + 30)))

    pygame.display.flip()


# ==== MAIN GAME LOOP ====
async def main():
    session = start_session()
    won = False
    last_move_time = 0

    clock = pygame.time.Clock()
    running = True

    while running:
        clock.tick(60)
        current_time = pygame.time.get_ticks()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_r and won:
                print("🔄 Restarting with a new maze")
                session = start_session()
                won = False

        # ============ MOVEMENT ============
        if not won and current_time - last_move_time > MOVE_DELAY:
            direction = read_direction(pygame.key.get_pressed())
            if direction is not None:
                moved = handle_directional_input(session, direction)
                if moved is not session:
                    session = moved
                    last_move_time = current_time

                if is_goal_reached(session):
                    won = True
                    print("🎉 Win!")

        draw(session, won)
        await asyncio.sleep(0)  # CRITICAL for Pygbag

    pygame.quit()


# ==== RUN ====
if __name__ == "__main__":
    asyncio.run(main())
