"""Listing the audio devices sounddevice can see."""

from typing import List

import sounddevice as sd

from ..core.errors import CaptureError

CHECK_SAMPLE_RATES = [8000, 16000, 22050, 44100, 48000, 96000]


def describe_devices(check_rates: bool = False) -> List[str]:
    """Describe every audio device, one or more lines each.

    Args:
        check_rates: Also probe which of CHECK_SAMPLE_RATES each input accepts

    Raises:
        CaptureError: If the audio subsystem cannot be queried
    """
    try:
        devices = sd.query_devices()
        default_input = sd.default.device[0]
        default_output = sd.default.device[1]
    except sd.PortAudioError as e:
        raise CaptureError(f"Could not query audio devices: {e}") from e

    lines = []
    for i, device in enumerate(devices):
        marks = []
        if i == default_input:
            marks.append("default input")
        if i == default_output:
            marks.append("default output")
        suffix = f" ({', '.join(marks)})" if marks else ""
        lines.append(f"Device {i}: {device['name']}{suffix}")
        lines.append(
            f"  inputs={device['max_input_channels']} "
            f"outputs={device['max_output_channels']} "
            f"default rate={device['default_samplerate']:g}Hz"
        )

        if check_rates and device["max_input_channels"] > 0:
            supported = []
            for rate in CHECK_SAMPLE_RATES:
                try:
                    sd.check_input_settings(device=i, samplerate=rate, channels=1)
                except (sd.PortAudioError, ValueError):
                    continue
                supported.append(str(rate))
            lines.append(f"  input rates: {', '.join(supported) or 'none'}")

    return lines
