# Copyright 2001 Someone Else
# SPDX-License-Identifier: MIT

print("already licensed")
