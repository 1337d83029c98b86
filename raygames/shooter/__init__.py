"""Space shooter game: ship, enemies, shields and a mystery ship."""