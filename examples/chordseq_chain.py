"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""

from mchain import Chain

CHORD_SEQUENCES = """song1; C; Am; F; G7; C;
song2; C; F; G7; C; Am; Dm; G7; C;
song3; C; E7; Am; F#7; F; G7; C;
song4; Dm; G7; C; A7; Dm; G7; C;"""

if __name__ == '__main__':
    # chord sequences are separated by ';', the first field is the title
    seqs = [seq.split(';')[1:-1] for seq in CHORD_SEQUENCES.splitlines()]
    seqs = [[chord.strip() for chord in seq] for seq in seqs]
    chain = Chain(seqs, state_size=1)
    for i in range(10):
        # bounded, the chords may loop for a while before reaching the end
        print(' '.join(chain.walk(max_steps=16)))
