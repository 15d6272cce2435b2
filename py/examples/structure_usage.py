#!/usr/bin/env python3
"""
Bitter Example: Structure Usage

This example builds a register layout at run time, then decodes a few
samples of it. The first field of a structure is the most significant one.
"""

import bitter as bt

def build_status() -> bt.Structure:
        status = bt.Structure('STATUS', [
                bt.enumeration('mode', 2, {0: 'idle', 1: 'run', 2: 'halt'}),
                bt.reserved(3),
                bt.integer('count', 10),
        ])
        status.append(bt.boolean('ready'))
        return status

def main():
        status = build_status()
        print(f'Structure: {status.name}, {status.size()} bits')

        for name in status:
                high, low = status.get_range(name)
                print(f'  {name:<8} [{high}:{low}]')

        # Many values share one structure
        for sample in (0x400B, 0x8000, 0xFFFF):
                v = bt.Value(sample, status)
                print(f'\nSample {v}')
                print(f'  mode  = {v.get_integer("mode")} ({v.get_label("mode")})')
                print(f'  count = {v.get_integer("count")}')
                print(f'  ready = {v.get_bool("ready")}')

if __name__ == '__main__':
        main()
