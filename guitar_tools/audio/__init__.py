"""Audio input and output for Guitar Tools.

The device-backed modules import sounddevice, which needs the PortAudio
library; import them directly where they are used.
"""
