"""Siglent instrument drivers for labhal.

Subpackages:
    sdg: SDG series arbitrary function generators.

Example:
    Output a 1 kHz sine on channel 1::

        from labhal_siglent.sdg import SDGChannel, WaveType, create_instrument

        gen = create_instrument("TCPIP::192.168.1.80::INSTR")
        gen.basic_wave.set_wave_type(SDGChannel.C1, WaveType.SINE)
        gen.basic_wave.set_frequency(SDGChannel.C1, 1000.0)
        gen.output.enable(SDGChannel.C1)
"""
