"""ARM2 instruction classes and the decoder that builds them from op codes."""