"""Character, memory, string, output, linked-list and line-reading helpers."""