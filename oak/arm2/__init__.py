"""The ARM2 CPU: status register, banked registers, instructions and the CPU core."""