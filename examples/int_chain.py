"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""

from mchain import Chain

if __name__ == '__main__':
    train_seqs = [[1, 2, 3, 2, 3, 4, 3, 4, 5], [4, 5, 6, 5, 6, 7, 6, 7, 8], [7, 8, 9, 8, 9, 10]]
    chain = Chain(train_seqs, state_size=2)
    print("integer sequence:")
    print(chain.walk())
    print("continuation of 3 4:")
    print(chain.walk([3, 4]))
    print("next after 8 9:", chain.move([8, 9]))
