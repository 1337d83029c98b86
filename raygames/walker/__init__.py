"""Walking characters with animation, an enemy and health bars."""