"""
╔══════════════════════════════════════════╗
║   🔥  CAMPFIRE SURVIVAL  🔥              ║
║   Python 3.8+  |  pip install pygame     ║
║   python main.py                         ║
╚══════════════════════════════════════════╝

โครงสร้างไฟล์:
  main.py      - จุดเริ่มต้น
  config.py    - ค่าคงที่และข้อมูลเกม
  world.py     - วงจรกลางวัน/กลางคืน, สร้าง resource nodes
  entities.py  - ResourceNode, Structure, Player
  controls.py  - input snapshot ต่อเฟรม
  session.py   - state ของเกมหนึ่งรอบ
  renderer.py  - วาด objects ในโลก
  ui.py        - HUD, game-over screen
  game.py      - Game loop หลัก

Environment:
  CAMPFIRE_SEED   world seed (int)
  CAMPFIRE_LOG    log level (default INFO)
"""
import logging
import os

from game import Game
from session import Session


def main():
    logging.basicConfig(
        level=os.environ.get("CAMPFIRE_LOG", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    seed = os.environ.get("CAMPFIRE_SEED")
    Game(Session(int(seed) if seed else None)).run()


if __name__ == "__main__":
    main()
