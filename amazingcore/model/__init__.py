"""Data types exchanged with the game client, written to and read from a protocol token stream."""